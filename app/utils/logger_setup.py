import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from colorama import Back, Fore, Style, init

from config.constants import LEVEL_TO_SHORT, LOG_CONFIG
from utils.session_context import SessionIdFilter

# Инициализация colorama
init(autoreset=True)


class ShortLevelFormatter(logging.Formatter):
    """Форматтер с сокращенными уровнями логирования и опциональной подсветкой."""

    LOG_COLORS = {
        logging.DEBUG: Fore.WHITE,
        logging.INFO: Fore.BLUE,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.LIGHTWHITE_EX + Back.RED + Style.BRIGHT,
    }
    NO_COLOR = Style.RESET_ALL

    def __init__(self, *args, use_color: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        # Запись может пройти через несколько обработчиков, поэтому копируем её
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = LEVEL_TO_SHORT.get(record.levelno, record.levelname)
        if not hasattr(record, "session_id"):
            record.session_id = "----"
        message = super().format(record)
        if not self.use_color:
            return message
        log_color = self.LOG_COLORS.get(record.levelno, self.NO_COLOR)
        return f"{log_color}{message}{self.NO_COLOR}"


def setup_logging(
    name_logger: str = LOG_CONFIG["main_logger_name"],
    log_filename: Optional[str] = None,
    level: Union[str, int, None] = None,
) -> logging.Logger:
    """
    Инициализация и настройка логгера.

    :param name_logger: Имя логгера
    :param log_filename: Файл для записи логов (если запись в файл включена)
    :param level: Уровень логирования, по умолчанию из LOG_CONFIG
    :return: Настроенный логгер
    """
    if log_filename is None:
        log_filename = f"{name_logger}.log"

    logger = logging.getLogger(name_logger)

    # Если логгер уже был настроен - очищаем настройки
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level or LOG_CONFIG["level"])

    session_filter = SessionIdFilter()

    if LOG_CONFIG["in_console_enabled"]:
        c_handler = logging.StreamHandler(sys.stdout)
        c_handler.setFormatter(
            ShortLevelFormatter(
                LOG_CONFIG["in_console_format"],
                datefmt=LOG_CONFIG["in_console_format_datetime"],
                use_color=True,
            )
        )
        c_handler.addFilter(session_filter)
        logger.addHandler(c_handler)

    if LOG_CONFIG["in_file_enabled"]:
        f_handler = RotatingFileHandler(
            log_filename,
            maxBytes=LOG_CONFIG["max_size_file_bytes"],
            backupCount=LOG_CONFIG["backup_file_count"],
            encoding="utf-8",
        )
        f_handler.setFormatter(
            ShortLevelFormatter(
                LOG_CONFIG["in_file_format"],
                datefmt=LOG_CONFIG["in_file_format_datetime"],
                use_color=False,
            )
        )
        f_handler.addFilter(session_filter)
        logger.addHandler(f_handler)

    return logger
