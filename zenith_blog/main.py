import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from zenith_blog.errors import install_error_handlers
from zenith_blog.perf import async_perf_log, performance_middleware
from zenith_blog.routes import pages, posts, products
from zenith_blog.routes.pages import STATIC_DIR
from zenith_blog.settings import load_settings
from zenith_blog.store import DB_URL, init_db

logger = logging.getLogger(__name__)
logging.basicConfig()
logging.getLogger("zenith_blog").setLevel(logging.INFO)

settings = load_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Initialize database
    async with async_perf_log(f"init_db ({DB_URL.split('://')[0]})", logger):
        await init_db()
    yield
    # Shutdown: cleanup if needed


app = FastAPI(lifespan=lifespan, title="Zenith Blog", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(performance_middleware)
install_error_handlers(app)

app.include_router(posts.router)
app.include_router(products.router)
app.include_router(pages.router)

# Must come last: the mount at "/" swallows every path not matched above
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


def run() -> None:
    logger.info(f"Zenith running at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
