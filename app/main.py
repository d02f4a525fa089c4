import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.generate import router as generate_router
from app.core.config import ALLOWED_ORIGINS, get_settings
from app.services.inference_factory import build_inference_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    build_inference_client(settings)
    logger.info(
        "startup",
        extra={
            "inference_backend": settings.inference_backend,
            "inference_model": settings.inference_model,
        },
    )
    yield


app = FastAPI(title="Recipe Relay", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(ALLOWED_ORIGINS),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(generate_router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "AI Food Creator Backend is running."


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
