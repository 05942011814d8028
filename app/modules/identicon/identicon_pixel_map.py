from dataclasses import replace

from config.constants import IDENTICON_GRID_WIDTH, IDENTICON_SQUARE_SIZE
from modules.identicon.identicon_image import IdenticonImage
from modules.identicon.identicon_parameter_validator import validate_square_size


def build_pixel_map(
    image: IdenticonImage, square_size: int = IDENTICON_SQUARE_SIZE
) -> IdenticonImage:
    """
    Для каждой закрашиваемой клетки вычисляет пару точек прямоугольника:
    левый верхний (x, y) и правый нижний угол.

    :param image: Запись с отфильтрованным полем grid.
    :param square_size: Сторона клетки в пикселях.
    :return: Новая запись с полем pixel_map.
    """
    square_size = validate_square_size(square_size)

    pixel_map = []
    for _code, index in image.grid:
        horizontal = index % IDENTICON_GRID_WIDTH * square_size
        vertical = index // IDENTICON_GRID_WIDTH * square_size

        top_left = (horizontal, vertical)
        bottom_right = (horizontal + square_size, vertical + square_size)
        pixel_map.append((top_left, bottom_right))

    return replace(image, pixel_map=tuple(pixel_map))
