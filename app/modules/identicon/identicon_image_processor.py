import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image

from config.constants import IDENTICON_FORMATS, LOG_CONFIG
from modules.identicon.identicon_parameter_validator import validate_format
from utils.text_utils import safe_filename

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


def resize_image(image: Image.Image, size: int) -> Image.Image:
    """
    Изменяет размер изображения без сглаживания, чтобы клетки оставались чёткими.

    :param image: Исходное изображение.
    :param size: Целевой размер (ширина и высота).
    :return: Измененное изображение.
    """
    if image.size == (size, size):
        return image
    return image.resize((size, size), Image.Resampling.NEAREST)


def image_to_buffer(image: Image.Image, image_format: str = "png") -> io.BytesIO:
    """
    Кодирует изображение в PNG или JPEG и сохраняет в байтовый буфер.

    :param image: Изображение для кодирования.
    :param image_format: 'png' или 'jpeg'.
    :return: io.BytesIO буфер, указатель в начале.
    """
    fmt = IDENTICON_FORMATS[validate_format(image_format)]
    output = io.BytesIO()
    if fmt["pil_format"] == "JPEG" and image.mode != "RGB":
        image = image.convert("RGB")
    image.save(output, format=fmt["pil_format"])
    output.seek(0)
    return output


def image_filename(value: str, image_format: str = "png") -> str:
    """
    Имя файла для identicon: входная строка с расширением формата.

    :param value: Входная строка.
    :param image_format: 'png' или 'jpeg'.
    :return: Имя файла, например 'asdf.png'.
    """
    extension = IDENTICON_FORMATS[validate_format(image_format)]["extension"]
    return f"{safe_filename(value)}.{extension}"


def save_image(
    image: Image.Image,
    value: str,
    output_dir: Union[str, Path] = ".",
    image_format: str = "png",
) -> Path:
    """
    Сохраняет изображение в файл '<value>.<ext>' в каталоге output_dir.

    :param image: Изображение для сохранения.
    :param value: Входная строка, из которой строится имя файла.
    :param output_dir: Каталог назначения (создается при отсутствии).
    :param image_format: 'png' или 'jpeg'.
    :return: Путь к сохраненному файлу.
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / image_filename(value, image_format)
    buffer = image_to_buffer(image, image_format)
    path.write_bytes(buffer.getvalue())
    logger.info(f"Identicon saved to {path}")
    return path
