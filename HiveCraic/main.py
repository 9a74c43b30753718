import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from api.router import api_router
from utils.errors import install_error_handlers
from utils.logging_config import setup_logging, RequestLoggingMiddleware

logger = logging.getLogger("hivecraic")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Hive Craic API starting (tz=%s)", settings.TIMEZONE)
    yield
    logger.info("Hive Craic API stopped")


app = FastAPI(
    title="Hive Craic API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)
app.include_router(api_router)

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
