import logging

from config.constants import LOG_CONFIG, SERVICE_NAME
from utils.logger_setup import setup_logging

logger = setup_logging(LOG_CONFIG["main_logger_name"])

from fastapi import FastAPI

from api.health.health_router import health_router
from api.identicon.identicon_router import identicon_router
from utils.lifespan_utils import lifespan
from utils.session_context import SessionIdFilter

session_filter = SessionIdFilter()

for uvicorn_logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
    uvicorn_logger = logging.getLogger(uvicorn_logger_name)
    uvicorn_logger.filters.clear()
    for handler in uvicorn_logger.handlers:
        handler.setFormatter(logger.handlers[0].formatter)
        handler.addFilter(session_filter)

app = FastAPI(
    title=f"{SERVICE_NAME.capitalize()} API",
    description="Сервис генерации симметричных аватаров (identicon) по строке",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(identicon_router)
