import pytest
from PIL import Image

from modules.identicon.identicon_errors import ConfigurationError
from modules.identicon.identicon_image import IdenticonImage
from modules.identicon.identicon_renderer import crop_image, draw_image
from modules.identicon.identicon_service import build_identicon

WHITE = (255, 255, 255)
RED = (200, 10, 20)


def single_square_image() -> IdenticonImage:
    return IdenticonImage(colour=RED, pixel_map=(((0, 0), (50, 50)),))


def test_draw_image_canvas_is_five_squares() -> None:
    raster = draw_image(single_square_image())
    assert raster.size == (250, 250)
    assert raster.mode == "RGB"


def test_draw_image_bottom_right_is_exclusive() -> None:
    raster = draw_image(single_square_image())
    assert raster.getpixel((0, 0)) == RED
    assert raster.getpixel((49, 49)) == RED
    assert raster.getpixel((50, 50)) == WHITE
    assert raster.getpixel((50, 0)) == WHITE
    assert raster.getpixel((0, 50)) == WHITE


def test_draw_image_adjacent_squares_do_not_overlap() -> None:
    image = IdenticonImage(colour=RED, pixel_map=(((50, 0), (100, 50)),))
    raster = draw_image(image)
    assert raster.getpixel((49, 0)) == WHITE
    assert raster.getpixel((50, 0)) == RED
    assert raster.getpixel((99, 49)) == RED
    assert raster.getpixel((100, 0)) == WHITE


def test_draw_image_custom_background() -> None:
    raster = draw_image(single_square_image(), background=(0, 0, 0))
    assert raster.getpixel((200, 200)) == (0, 0, 0)


def test_draw_image_no_squares_is_all_background() -> None:
    raster = draw_image(IdenticonImage(colour=RED, pixel_map=()))
    assert raster.getcolors() == [(250 * 250, WHITE)]


def test_draw_image_asdf_pixels() -> None:
    raster = draw_image(build_identicon("asdf", 50))
    colour = (145, 46, 200)
    assert raster.getpixel((25, 25)) == WHITE  # клетка 0: 145 нечётное
    assert raster.getpixel((75, 25)) == colour  # клетка 1: 46
    assert raster.getpixel((225, 25)) == WHITE  # клетка 4 зеркальна клетке 0
    assert raster.getpixel((175, 25)) == colour  # клетка 3 зеркальна клетке 1
    assert raster.getpixel((125, 225)) == WHITE  # клетка 22: 181


def test_draw_image_is_horizontally_symmetric() -> None:
    raster = draw_image(build_identicon("symmetry", 10), 10)
    assert raster.size == (50, 50)
    assert raster.transpose(Image.Transpose.FLIP_LEFT_RIGHT).tobytes() == raster.tobytes()


def test_oversized_canvas_then_crop_matches_exact_canvas() -> None:
    image = build_identicon("asdf", 50)
    exact = draw_image(image, 50)
    oversized = draw_image(image, 50, canvas_size=50 * 50)
    assert oversized.size == (2500, 2500)
    cropped = crop_image(oversized, 50)
    assert cropped.size == (250, 250)
    assert cropped.tobytes() == exact.tobytes()


def test_crop_image_is_noop_for_exact_canvas() -> None:
    raster = draw_image(single_square_image())
    assert crop_image(raster) is raster


def test_draw_image_rejects_small_canvas() -> None:
    with pytest.raises(ConfigurationError):
        draw_image(single_square_image(), 50, canvas_size=100)


@pytest.mark.parametrize("background", [(0, 0), (0, 0, 256), "white"])
def test_draw_image_rejects_bad_background(background) -> None:
    with pytest.raises(ConfigurationError):
        draw_image(single_square_image(), background=background)


def test_crop_image_rejects_bad_square_size() -> None:
    with pytest.raises(ConfigurationError):
        crop_image(draw_image(single_square_image()), 0)
