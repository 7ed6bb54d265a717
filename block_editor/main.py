import logging
import logging.handlers
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from block_editor.api.blocks import router as blocks_router
from block_editor.api.dependencies import get_schema_build
from block_editor.api.graphql import router as graphql_router
from block_editor.config import settings

LOG_DIR = Path(settings.log_dir)
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.DEBUG if settings.debug else logging.INFO

# Console handler (stdout)
logging.basicConfig(level=LOG_LEVEL, format=LOG_FMT)

# File handler, rotated daily, 30 days kept
_file_handler = logging.handlers.TimedRotatingFileHandler(
    LOG_DIR / "block_editor.log",
    when="midnight",
    backupCount=30,
    encoding="utf-8",
)
_file_handler.setFormatter(logging.Formatter(LOG_FMT))
_file_handler.setLevel(LOG_LEVEL)
logging.getLogger().addHandler(_file_handler)

logger = logging.getLogger("block_editor")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Building schema...")
    get_schema_build()
    logger.info("%s started.", settings.app_name)
    yield
    logger.info("%s shutting down.", settings.app_name)


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

app.include_router(blocks_router)
app.include_router(graphql_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "app": settings.app_name}
