import io

import pytest
from PIL import Image

from modules.identicon.identicon_errors import ConfigurationError, InvalidInputError
from modules.identicon.identicon_image_processor import (
    image_filename,
    image_to_buffer,
    resize_image,
    save_image,
)
from modules.identicon.identicon_service import (
    build_identicon,
    generate_identicon,
    get_identicon_image,
    identicon_etag,
    render_identicon,
)


def test_build_identicon_populates_every_field() -> None:
    image = build_identicon("asdf")
    assert image.hex[:3] == (145, 46, 200)
    assert image.colour == (145, 46, 200)
    assert len(image.grid) == 12
    assert len(image.pixel_map) == len(image.grid)
    assert image.pixel_map[0] == ((50, 0), (100, 50))


@pytest.mark.parametrize("value", ["", "asdf", "someone@example.org"])
def test_pipeline_is_deterministic(value: str) -> None:
    assert build_identicon(value) == build_identicon(value)
    assert render_identicon(value) == render_identicon(value)


def test_render_identicon_bitmap() -> None:
    bitmap = render_identicon("asdf")
    assert (bitmap.width, bitmap.height) == (250, 250)
    assert bitmap.mode == "RGB"
    assert len(bitmap.pixels) == 250 * 250 * 3


def test_generate_identicon_empty_string() -> None:
    raster = generate_identicon("")
    assert raster.size == (250, 250)


def test_generate_identicon_custom_square_size() -> None:
    assert generate_identicon("asdf", square_size=4).size == (20, 20)


def test_generate_identicon_with_oversized_canvas() -> None:
    exact = generate_identicon("asdf")
    legacy = generate_identicon("asdf", canvas_size=2500)
    assert legacy.size == exact.size
    assert legacy.tobytes() == exact.tobytes()


def test_generate_identicon_rejects_bad_square_size() -> None:
    with pytest.raises(ConfigurationError):
        generate_identicon("asdf", square_size=0)


def test_generate_identicon_rejects_non_string() -> None:
    with pytest.raises(InvalidInputError):
        generate_identicon(42)  # type: ignore[arg-type]


def test_identicon_etag() -> None:
    assert identicon_etag("asdf") == "912ec803b2ce49e4a541068d495ab570"


def test_get_identicon_image_png_default() -> None:
    buffer, media_type = get_identicon_image("asdf", {})
    assert media_type == "image/png"
    with Image.open(buffer) as decoded:
        assert decoded.format == "PNG"
        assert decoded.size == (250, 250)
        assert decoded.convert("RGB").tobytes() == generate_identicon("asdf").tobytes()


def test_get_identicon_image_resized_jpeg() -> None:
    buffer, media_type = get_identicon_image("asdf", {"size": 64, "format": "jpeg"})
    assert media_type == "image/jpeg"
    with Image.open(buffer) as decoded:
        assert decoded.format == "JPEG"
        assert decoded.size == (64, 64)


def test_get_identicon_image_rejects_unknown_format() -> None:
    with pytest.raises(ConfigurationError):
        get_identicon_image("asdf", {"format": "gif"})


def test_resize_image_nearest_keeps_colours() -> None:
    raster = generate_identicon("asdf")
    resized = resize_image(raster, 500)
    assert resized.size == (500, 500)
    assert sorted(c for _, c in resized.getcolors()) == sorted(c for _, c in raster.getcolors())


def test_image_to_buffer_rewinds() -> None:
    buffer = image_to_buffer(generate_identicon("asdf"), "png")
    assert isinstance(buffer, io.BytesIO)
    assert buffer.tell() == 0
    assert buffer.read(8) == b"\x89PNG\r\n\x1a\n"


def test_image_filename() -> None:
    assert image_filename("asdf") == "asdf.png"
    assert image_filename("asdf", "jpeg") == "asdf.jpg"
    assert image_filename("a/b") == "a_b.png"
    assert image_filename("") == "_.png"


def test_save_image_writes_file(tmp_path) -> None:
    path = save_image(generate_identicon("asdf"), "asdf", tmp_path / "out")
    assert path == tmp_path / "out" / "asdf.png"
    with Image.open(path) as saved:
        assert saved.size == (250, 250)
