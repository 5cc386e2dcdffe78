import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from typing import Optional

from fastapi import FastAPI

from .config import settings
from .persistence import PersistenceGateway
from .quiz import QuizEngine
from .router import router

logger = logging.getLogger("woro")


# --- Logging Setup ---
def setup_logging():
    logger.setLevel(logging.INFO)
    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)
    # Root handler so persistence errors also reach stderr
    logging.basicConfig(level=logging.INFO)


def build_engine() -> QuizEngine:
    return QuizEngine(PersistenceGateway(settings.WORDS_FILE))


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.engine is None:
        app.state.engine = build_engine()
    logger.info(f"{settings.PROJECT_NAME} ready with {len(app.state.engine.store)} words")
    yield


# --- App Factory ---
def create_app(engine: Optional[QuizEngine] = None) -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )
    app.state.engine = engine

    app.include_router(router)

    return app
