from functools import lru_cache

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.services.inference_base import InferenceClient
from app.services.inference_openai import OpenAIInferenceClient
from app.services.inference_stub import StubInferenceClient


@lru_cache
def build_inference_client(settings: Settings) -> InferenceClient:
    if settings.inference_backend == "remote":
        return OpenAIInferenceClient(
            endpoint=settings.inference_endpoint or "",
            api_key=settings.inference_api_key or "",
        )

    return StubInferenceClient()


def get_inference_client(settings: Settings = Depends(get_settings)) -> InferenceClient:
    return build_inference_client(settings)
