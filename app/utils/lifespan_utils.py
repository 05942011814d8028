import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.constants import LOG_CONFIG
from config.settings import settings

logger = logging.getLogger(LOG_CONFIG["main_logger_name"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Асинхронный менеджер контекста жизненного цикла приложения FastAPI.
    Запоминает время запуска и логирует старт и остановку процесса.

    :param app: Экземпляр приложения FastAPI
    """
    app.state.boot_time = time.time()
    logger.info(
        f"Process started [{os.getpid()}], square size: {settings.square_size}, "
        f"format: {settings.image_format}"
    )

    yield

    logger.info(f"Process stopped [{os.getpid()}]")
