from typing import Any, Optional, Sequence, Tuple

from config.constants import IDENTICON_FORMATS, IDENTICON_GRID_WIDTH
from modules.identicon.identicon_errors import ConfigurationError


def validate_square_size(square_size: Any) -> int:
    """
    Проверяет размер клетки: целое положительное число.

    :param square_size: Значение из настроек или аргумента.
    :return: Размер клетки как int.
    """
    if isinstance(square_size, bool) or not isinstance(square_size, int):
        raise ConfigurationError(
            f"Square size must be an integer, got {square_size!r}"
        )
    if square_size <= 0:
        raise ConfigurationError(f"Square size must be positive, got {square_size}")
    return square_size


def validate_canvas_size(canvas_size: Optional[int], square_size: int) -> int:
    """
    Проверяет размер холста. None означает холст ровно под сетку.

    :param canvas_size: Сторона холста в пикселях или None.
    :param square_size: Уже проверенный размер клетки.
    :return: Сторона холста.
    """
    grid_side = square_size * IDENTICON_GRID_WIDTH
    if canvas_size is None:
        return grid_side
    if isinstance(canvas_size, bool) or not isinstance(canvas_size, int):
        raise ConfigurationError(
            f"Canvas size must be an integer, got {canvas_size!r}"
        )
    if canvas_size < grid_side:
        raise ConfigurationError(
            f"Canvas size {canvas_size} is smaller than the grid ({grid_side})"
        )
    return canvas_size


def validate_colour(colour: Sequence[Any]) -> Tuple[int, int, int]:
    """
    Проверяет цвет (например, фон из settings.yml): три целых 0..255.

    :param colour: Последовательность из трёх компонент.
    :return: Кортеж (R, G, B).
    """
    try:
        components = tuple(colour)
    except TypeError:
        raise ConfigurationError(f"Colour must be a sequence, got {colour!r}")
    if len(components) != 3 or not all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
        for c in components
    ):
        raise ConfigurationError(
            f"Colour must be three integers in 0..255, got {colour!r}"
        )
    return components


def validate_format(image_format: str) -> str:
    """
    Проверяет формат изображения.

    :param image_format: 'png' или 'jpeg' (регистр не важен).
    :return: Нормализованное имя формата.
    """
    normalized = str(image_format).lower()
    if normalized == "jpg":
        normalized = "jpeg"
    if normalized not in IDENTICON_FORMATS:
        raise ConfigurationError(
            f"Unsupported image format '{image_format}', expected one of {list(IDENTICON_FORMATS)}"
        )
    return normalized
