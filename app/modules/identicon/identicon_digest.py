import hashlib

from modules.identicon.identicon_errors import InvalidInputError
from modules.identicon.identicon_image import IdenticonImage


def hash_input(value: str) -> IdenticonImage:
    """
    Вычисляет MD5 входной строки и сохраняет его как 16 чисел 0..255.

    MD5 используется только ради 16-байтного результата, не ради стойкости.
    Пустая строка допустима.

    :param value: Строка, например имя пользователя.
    :return: IdenticonImage с заполненным полем hex.
    """
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Identicon input must be a string, got {type(value).__name__}"
        )
    try:
        data = value.encode("utf-8")
    except UnicodeEncodeError as e:
        # Одиночные суррогаты не кодируются в UTF-8
        raise InvalidInputError(f"Identicon input is not valid text: {e}") from e

    return IdenticonImage(hex=tuple(hashlib.md5(data).digest()))
