from dataclasses import dataclass
from typing import Optional, Tuple

Colour = Tuple[int, int, int]
GridCell = Tuple[int, int]  # (значение байта, индекс клетки 0..24)
Point = Tuple[int, int]
PixelRect = Tuple[Point, Point]  # (левый верхний угол, правый нижний угол)


@dataclass(frozen=True)
class IdenticonImage:
    """
    Состояние конвейера генерации identicon.

    Каждый этап возвращает новую запись через dataclasses.replace, заполняя
    своё поле; поля, заполненные ранее, не изменяются.

    :param hex: 16 байт MD5-хеша входной строки.
    :param colour: Цвет заливки (R, G, B).
    :param grid: Клетки сетки 5x5 в порядке строк.
    :param pixel_map: Прямоугольники для закрашиваемых клеток.
    """

    hex: Optional[Tuple[int, ...]] = None
    colour: Optional[Colour] = None
    grid: Optional[Tuple[GridCell, ...]] = None
    pixel_map: Optional[Tuple[PixelRect, ...]] = None

    def to_dict(self) -> dict:
        """
        Представление записи для JSON-ответа API.

        :return: Словарь со всеми полями (кортежи превращены в списки).
        """
        return {
            "hex": list(self.hex) if self.hex is not None else None,
            "colour": list(self.colour) if self.colour is not None else None,
            "grid": [list(cell) for cell in self.grid] if self.grid is not None else None,
            "pixel_map": (
                [[list(start), list(stop)] for start, stop in self.pixel_map]
                if self.pixel_map is not None
                else None
            ),
        }


@dataclass(frozen=True)
class IdenticonBitmap:
    """Сырой RGB-буфер готового изображения для внешних кодировщиков."""

    width: int
    height: int
    pixels: bytes
    mode: str = "RGB"
