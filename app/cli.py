import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from config.constants import IDENTICON_FORMATS, LOG_CONFIG
from config.settings import settings
from modules.identicon.identicon_image_processor import save_image
from modules.identicon.identicon_service import generate_identicon
from utils.logger_setup import setup_logging
from utils.session_context import new_session_id

logger = logging.getLogger(LOG_CONFIG["main_logger_name"] + ".cli")


def build_parser() -> argparse.ArgumentParser:
    """
    Создает парсер аргументов командной строки.

    :return: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Генерация identicon (симметричного аватара 5x5) по строке",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Отладочные логи")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Сохранить identicon в файл")
    generate.add_argument("value", help="Строка, например имя пользователя")
    generate.add_argument(
        "-o", "--output-dir", default=None, help="Каталог для сохранения файла"
    )
    generate.add_argument(
        "-s", "--square-size", type=int, default=None, help="Сторона клетки в пикселях"
    )
    generate.add_argument(
        "-f",
        "--format",
        choices=list(IDENTICON_FORMATS),
        default=None,
        help="Формат файла",
    )

    subparsers.add_parser("serve", help="Запустить HTTP API")
    return parser


def run_generate(args: argparse.Namespace) -> int:
    """
    Генерирует identicon и сохраняет его как '<value>.<ext>'.

    :param args: Разобранные аргументы.
    :return: Код возврата процесса.
    """
    output_dir = args.output_dir or settings.output_dir
    image_format = args.format or settings.image_format

    image = generate_identicon(args.value, square_size=args.square_size)
    path = save_image(image, args.value, output_dir, image_format)
    print(path)
    return 0


def run_serve(args: argparse.Namespace) -> int:
    """
    Запускает FastAPI приложение через uvicorn.

    :param args: Разобранные аргументы.
    :return: Код возврата процесса.
    """
    uvicorn.run(
        app="main:app",
        host=settings.app_host,
        port=settings.app_port,
        workers=settings.app_workers,
        proxy_headers=True,
        forwarded_allow_ips="*",
        access_log=False,
        lifespan="on",
        reload=settings.app_reload,
    )
    return 0


COMMANDS = {
    "generate": run_generate,
    "serve": run_serve,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Точка входа командной строки.

    :param argv: Аргументы (по умолчанию sys.argv[1:]).
    :return: Код возврата процесса.
    """
    args = build_parser().parse_args(argv)
    setup_logging(
        LOG_CONFIG["main_logger_name"],
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    new_session_id()

    try:
        return COMMANDS[args.command](args)
    except ValueError as e:
        logger.error(f"Identicon generation failed: {type(e).__name__}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot write identicon: {type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
