from dataclasses import replace

from modules.identicon.identicon_image import IdenticonImage


def pick_colour(image: IdenticonImage) -> IdenticonImage:
    """
    Берет первые 3 байта хеша как цвет (R, G, B).

    :param image: Запись с заполненным полем hex.
    :return: Новая запись с полем colour.
    """
    red, green, blue = image.hex[:3]
    return replace(image, colour=(red, green, blue))
