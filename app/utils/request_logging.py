import logging
from typing import Any, Dict, Optional

from fastapi import Request

from config.constants import LOG_CONFIG
from utils.text_utils import truncate_middle

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])

# Максимальная длина входной строки в логах
LOGGED_VALUE_LIMIT = 64


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def log_identicon_request(
    request: Request, value: str, params: Optional[Dict[str, Any]] = None
) -> None:
    """
    Логирует запрос на генерацию identicon

    :param request: Объект запроса
    :param value: Строка, по которой строится identicon
    :param params: Параметры запроса (без значений по умолчанию)
    """
    message = f"[{request.method}] {_client_ip(request)} - identicon for '{truncate_middle(value, LOGGED_VALUE_LIMIT)}'"
    if params:
        message += " [" + ", ".join(f"{k}: {v}" for k, v in params.items()) + "]"
    logger.info(message)


def log_request_error(request: Request, e: Exception) -> None:
    """
    Логирует информацию об ошибке запроса

    :param request: Объект запроса
    :param e: Объект исключения
    """
    logger.error(
        f"[ERROR][{request.method}] {_client_ip(request)} - {request.url.path} - {type(e).__name__}: {str(e)}"
    )
