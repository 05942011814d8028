import logging
import uuid
from contextvars import ContextVar
from typing import Optional

session_id_var: ContextVar[Optional[str]] = ContextVar("session_id", default=None)


def get_session_id() -> str:
    """
    Возвращает текущий ID сессии из contextvar или '----' если он не установлен.

    :return: Строка с ID сессии или значением по умолчанию.
    """
    return session_id_var.get() or "----"


def new_session_id() -> str:
    """
    Генерирует короткий ID для запроса (или запуска CLI) и сохраняет его в contextvar.

    :return: Новый ID сессии.
    """
    session_id = uuid.uuid4().hex[:4]
    session_id_var.set(session_id)
    return session_id


class SessionIdFilter(logging.Filter):
    """
    Фильтр для добавления ID сессии в каждую запись лога.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = get_session_id()
        return True
