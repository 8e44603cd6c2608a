import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fileblog.db.file_store import get_file_store
from fileblog.routers import posts
from fileblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_file_store()
    store.ensure_root()
    logger.info(f"Posts are stored in: {store.root.resolve()}")
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description="Blog posts stored as one JSON file each",
    lifespan=lifespan,
)

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": f"{settings.APP_TITLE} is running"}
