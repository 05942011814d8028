import io
import logging
from typing import Dict, Optional, Sequence, Tuple

from PIL import Image

from config.constants import IDENTICON_FORMATS, LOG_CONFIG
from config.settings import settings
from modules.identicon.identicon_colour import pick_colour
from modules.identicon.identicon_digest import hash_input
from modules.identicon.identicon_grid import build_grid, filter_odd_squares
from modules.identicon.identicon_image import IdenticonBitmap, IdenticonImage
from modules.identicon.identicon_image_processor import image_to_buffer, resize_image
from modules.identicon.identicon_parameter_validator import (
    validate_format,
    validate_square_size,
)
from modules.identicon.identicon_pixel_map import build_pixel_map
from modules.identicon.identicon_renderer import crop_image, draw_image

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def _resolve_square_size(square_size: Optional[int]) -> int:
    if square_size is None:
        square_size = settings.square_size
    return validate_square_size(square_size)


def build_identicon(value: str, square_size: Optional[int] = None) -> IdenticonImage:
    """
    Выполняет этапы до отрисовки: хеш, цвет, сетка, фильтр, карта пикселей.

    :param value: Входная строка.
    :param square_size: Сторона клетки; None - значение из настроек.
    :return: Полностью заполненная запись IdenticonImage.
    """
    square_size = _resolve_square_size(square_size)

    image = hash_input(value)
    image = pick_colour(image)
    image = build_grid(image)
    image = filter_odd_squares(image)
    image = build_pixel_map(image, square_size)

    logger.debug(
        f"Identicon built: colour={image.colour}, painted squares={len(image.grid)}"
    )
    return image


def generate_identicon(
    value: str,
    square_size: Optional[int] = None,
    canvas_size: Optional[int] = None,
    background: Optional[Sequence[int]] = None,
) -> Image.Image:
    """
    Полный конвейер: строка -> готовое изображение 5x5 клеток.

    :param value: Входная строка.
    :param square_size: Сторона клетки; None - значение из настроек.
    :param canvas_size: Сторона рабочего холста; None - ровно под сетку.
    :param background: Цвет фона; None - значение из настроек.
    :return: Изображение PIL.Image размером 5 * square_size.
    """
    square_size = _resolve_square_size(square_size)
    if background is None:
        background = settings.background

    image = build_identicon(value, square_size)
    raster = draw_image(image, square_size, canvas_size, background)
    return crop_image(raster, square_size)


def render_identicon(value: str, square_size: Optional[int] = None) -> IdenticonBitmap:
    """
    Возвращает сырой RGB-буфер identicon с размерами.

    :param value: Входная строка.
    :param square_size: Сторона клетки; None - значение из настроек.
    :return: IdenticonBitmap.
    """
    raster = generate_identicon(value, square_size)
    return IdenticonBitmap(
        width=raster.width,
        height=raster.height,
        pixels=raster.tobytes(),
        mode=raster.mode,
    )


def identicon_etag(value: str) -> str:
    """
    ETag identicon - hex-представление MD5 входной строки.

    :param value: Входная строка.
    :return: Строка из 32 шестнадцатеричных символов.
    """
    return bytes(hash_input(value).hex).hex()


def get_identicon_image(value: str, params: Dict) -> Tuple[io.BytesIO, str]:
    """
    Генерирует и кодирует identicon для HTTP-ответа.

    :param value: Входная строка.
    :param params: Параметры запроса ('size', 'format').
    :return: Кортеж (буфер с изображением, media type).
    """
    image_format = validate_format(params.get("format") or settings.image_format)
    image = generate_identicon(value)

    size = params.get("size")
    if size:
        image = resize_image(image, size)

    media_type = IDENTICON_FORMATS[image_format]["media_type"]
    return image_to_buffer(image, image_format), media_type
