import logging
from typing import Optional, Sequence

from PIL import Image, ImageDraw

from config.constants import (
    IDENTICON_BACKGROUND,
    IDENTICON_GRID_WIDTH,
    IDENTICON_IMAGE_MODE,
    IDENTICON_SQUARE_SIZE,
    LOG_CONFIG,
)
from modules.identicon.identicon_image import IdenticonImage
from modules.identicon.identicon_parameter_validator import (
    validate_canvas_size,
    validate_colour,
    validate_square_size,
)

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def draw_image(
    image: IdenticonImage,
    square_size: int = IDENTICON_SQUARE_SIZE,
    canvas_size: Optional[int] = None,
    background: Sequence[int] = IDENTICON_BACKGROUND,
) -> Image.Image:
    """
    Рисует прямоугольники pixel_map цветом colour на холсте.

    Левый верхний угол прямоугольника закрашивается, правый нижний - нет:
    ((0, 0), (50, 50)) закрашивает пиксели с x и y от 0 до 49, поэтому
    соседние клетки не перекрываются.

    :param image: Запись с полями colour и pixel_map.
    :param square_size: Сторона клетки в пикселях.
    :param canvas_size: Сторона холста. По умолчанию ровно 5 клеток;
        больший холст нужно затем обрезать через crop_image.
    :param background: Цвет фона (R, G, B).
    :return: Изображение PIL.Image в режиме RGB.
    """
    square_size = validate_square_size(square_size)
    canvas_size = validate_canvas_size(canvas_size, square_size)
    background = validate_colour(background)

    raster = Image.new(IDENTICON_IMAGE_MODE, (canvas_size, canvas_size), background)
    draw = ImageDraw.Draw(raster)
    fill_colour = tuple(image.colour)

    for (x0, y0), (x1, y1) in image.pixel_map:
        # ImageDraw.rectangle включает обе границы
        draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=fill_colour)

    logger.debug(
        f"Rendered {len(image.pixel_map)} squares on {canvas_size}x{canvas_size} canvas"
    )
    return raster


def crop_image(
    raster: Image.Image, square_size: int = IDENTICON_SQUARE_SIZE
) -> Image.Image:
    """
    Обрезает холст до области сетки (0, 0, 5 * square_size, 5 * square_size).
    Если холст уже нужного размера, возвращает его без изменений.

    :param raster: Отрисованное изображение.
    :param square_size: Сторона клетки в пикселях.
    :return: Изображение размером 5 клеток на 5 клеток.
    """
    side = validate_square_size(square_size) * IDENTICON_GRID_WIDTH
    if raster.size == (side, side):
        return raster
    logger.debug(f"Cropping {raster.width}x{raster.height} canvas to {side}x{side}")
    return raster.crop((0, 0, side, side))
