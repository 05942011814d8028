import logging
from dataclasses import replace
from typing import List, Sequence

from config.constants import IDENTICON_GRID_WIDTH, IDENTICON_ROW_CHUNK, LOG_CONFIG
from modules.identicon.identicon_errors import InvalidInputError
from modules.identicon.identicon_image import IdenticonImage

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def mirror_row(row: Sequence[int]) -> List[int]:
    """
    Отражает строку из 3 значений в строку из 5: [a, b, c] -> [a, b, c, b, a].

    :param row: Три значения строки.
    :return: Симметричная строка из 5 значений.
    """
    if len(row) < IDENTICON_ROW_CHUNK:
        raise InvalidInputError(
            f"Grid row must contain {IDENTICON_ROW_CHUNK} values, got {len(row)}"
        )
    first, second = row[0], row[1]
    return [*row[:IDENTICON_ROW_CHUNK], second, first]


def build_grid(image: IdenticonImage) -> IdenticonImage:
    """
    Разбивает хеш на тройки, отражает каждую в строку из 5 клеток
    и нумерует клетки по порядку (0..24, построчно).

    Берутся только полные тройки: из 16 байт используются первые 15,
    последний байт отбрасывается.

    :param image: Запись с заполненным полем hex.
    :return: Новая запись с полем grid из пар (значение, индекс).
    """
    hex_list = image.hex
    usable = len(hex_list) - len(hex_list) % IDENTICON_ROW_CHUNK
    rows = [
        mirror_row(hex_list[i:i + IDENTICON_ROW_CHUNK])
        for i in range(0, usable, IDENTICON_ROW_CHUNK)
    ]
    values = [value for row in rows for value in row]
    grid = tuple((value, index) for index, value in enumerate(values))

    if len(grid) != IDENTICON_GRID_WIDTH * IDENTICON_GRID_WIDTH:
        logger.warning(
            f"Unexpected grid size {len(grid)} built from {len(hex_list)} bytes"
        )
    return replace(image, grid=grid)


def filter_odd_squares(image: IdenticonImage) -> IdenticonImage:
    """
    Оставляет только клетки с чётным значением - они будут закрашены.
    Порядок клеток сохраняется.

    :param image: Запись с заполненным полем grid.
    :return: Новая запись, в grid которой только чётные клетки.
    """
    grid = tuple(cell for cell in image.grid if cell[0] % 2 == 0)
    return replace(image, grid=grid)
