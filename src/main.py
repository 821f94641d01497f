"""Application entrypoint: `uvicorn src.main:app`"""

import logging

from fastapi import FastAPI

from src.api.routes import EXCEPTION_HANDLERS, router
from src.core.logging_utils import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="tic-tac-toe", exception_handlers=EXCEPTION_HANDLERS)
    app.include_router(router)
    logger.info("Tic-tac-toe API ready")
    return app


app = create_app()
