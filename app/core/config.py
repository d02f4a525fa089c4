import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "https://ai-food-creator.netlify.app",
)


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    port: int = Field(default=5000, gt=0, lt=65536)
    inference_backend: Literal["remote", "stub"] = "remote"
    inference_endpoint: str | None = None
    inference_api_key: str | None = None
    inference_model: str = "openai/gpt-4.1"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @model_validator(mode="after")
    def _validate_remote(self) -> "Settings":
        if self.inference_backend == "remote":
            if not self.inference_endpoint:
                raise ValueError("AZURE_OPENAI_ENDPOINT is required when INFERENCE_BACKEND=remote")
            if not self.inference_api_key:
                raise ValueError("AZURE_OPENAI_KEY is required when INFERENCE_BACKEND=remote")
        return self


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    raw = {
        "port": os.getenv("PORT") or 5000,
        "inference_backend": os.getenv("INFERENCE_BACKEND", "remote").strip().lower(),
        "inference_endpoint": os.getenv("AZURE_OPENAI_ENDPOINT"),
        "inference_api_key": os.getenv("AZURE_OPENAI_KEY"),
        "inference_model": os.getenv("AZURE_OPENAI_MODEL") or "openai/gpt-4.1",
        "log_level": os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    }
    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
