import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError
from starlette.responses import StreamingResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from api.identicon.identicon_schema import (
    IdenticonInfo,
    IdenticonParams,
    IdenticonQuery,
)
from config.constants import LOG_CONFIG
from modules.identicon import identicon_service
from utils.request_logging import log_identicon_request, log_request_error
from utils.session_context import new_session_id

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])

identicon_router = APIRouter(prefix="/identicon", tags=["Identicon"])


@identicon_router.get("/{value}/info", response_model=IdenticonInfo)
def get_identicon_info(value: str, request: Request) -> IdenticonInfo:
    """
    Возвращает промежуточные данные генерации: хеш, цвет, сетку и карту пикселей.

    :param value: Входная строка.
    :param request: HTTP-запрос.
    :return: IdenticonInfo.
    """
    new_session_id()
    log_identicon_request(request, value)
    try:
        image = identicon_service.build_identicon(value)
        return IdenticonInfo(**image.to_dict())
    except ValueError as e:
        logger.warning(f"Invalid identicon request: {e}")
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        log_request_error(request, e)
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while building the identicon.",
        )


def _identicon_response(request: Request, value: Optional[str] = None):
    """
    Валидирует параметры, генерирует identicon и формирует ответ.

    :param request: HTTP-запрос.
    :param value: Строка из пути; None - строка берется из query (?v=...).
    :return: StreamingResponse с изображением.
    """
    new_session_id()
    try:
        query = dict(request.query_params)
        if value is None:
            params = IdenticonQuery.model_validate(query)
            value = params.value
        else:
            params = IdenticonParams.model_validate(query)
        params_dict = params.model_dump(exclude_defaults=True, exclude={"value"})
        log_identicon_request(request, value, params_dict)

        image_buffer, media_type = identicon_service.get_identicon_image(
            value, params_dict
        )
        headers = {"ETag": f'"{identicon_service.identicon_etag(value)}"'}
        return StreamingResponse(image_buffer, media_type=media_type, headers=headers)

    except ValidationError as e:
        logger.warning(f"Invalid identicon request parameters: {e}")
        error_detail = e.errors()[0]
        msg = f"Invalid value for parameter '{error_detail['loc'][0]}': {error_detail['msg']}"
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=msg)
    except ValueError as e:
        logger.warning(f"Invalid identicon request: {e}")
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        log_request_error(request, e)
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while generating the identicon.",
        )


@identicon_router.get("")
def get_identicon_by_query(request: Request):
    """
    Возвращает identicon для строки из параметра v (или value).
    Подходит для пустой строки и строк со слешем, которые нельзя передать в пути.

    :param request: HTTP-запрос.
    :return: Изображение в формате PNG или JPEG.
    """
    return _identicon_response(request)


@identicon_router.get("/{value}")
def get_identicon(value: str, request: Request):
    """
    Возвращает identicon для строки.

    :param value: Входная строка (например, имя пользователя).
    :param request: HTTP-запрос.
    :return: Изображение в формате PNG или JPEG.
    """
    return _identicon_response(request, value)
