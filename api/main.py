"""FastAPI application entrypoint — Employee Register API."""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

try:
    from dotenv import load_dotenv

    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
except ImportError:
    pass  # env vars set by the host

from api.database import init_db
from api.images import images_dir
from api.routers import employees, health
from config import API_VERSION, CORS_ORIGINS, IMAGES_URL_PATH
from logger_config import setup_logger

logger = setup_logger("api.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"Employee Register API {API_VERSION} ready (images in {images_dir()})")
    yield


app = FastAPI(title="Employee Register API", version=API_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

app.include_router(health.router)
app.include_router(employees.router, prefix="/api/employee", tags=["employees"])
app.mount(IMAGES_URL_PATH, StaticFiles(directory=images_dir()), name="images")
