import time
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Query, Request

health_router = APIRouter(prefix="/health", tags=["Health"])


@health_router.get("", response_model=Dict[str, Any])
async def health_check(
    request: Request,
    data: Optional[str] = Query(
        None,
        description="Список дополнительных данных через запятую (например, 'time')",
    ),
) -> Dict[str, Any]:
    """
    Проверяет доступность сервиса.

    :param request: HTTP-запрос (нужен для доступа к состоянию приложения)
    :param data: Опциональный параметр для запроса дополнительных данных
                 'time': возвращает время запуска и текущее время сервера
    :return: Статус доступности сервиса и запрошенные данные
    """
    response: Dict[str, Any] = {"status": "OK"}

    if data:
        requested_data = {item.strip() for item in data.split(",")}
        if "time" in requested_data:
            boot_timestamp = getattr(request.app.state, "boot_time", 0.0)
            response["boot_time"] = datetime.fromtimestamp(boot_timestamp).isoformat()
            response["current_time"] = datetime.fromtimestamp(time.time()).isoformat()

    return response
