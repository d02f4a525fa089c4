import logging
from typing import Any

from app.services.errors import ProviderError
from app.services.inference_base import ChatMessage, CompletionParams

logger = logging.getLogger(__name__)

inference_call_counters = {
    "success": 0,
    "failure": 0,
}


class OpenAIInferenceClient:
    """Chat-completions client for an OpenAI-compatible inference endpoint.

    SDK retries are disabled; a failed call is reported once and never replayed.
    """

    _MAX_API_RETRIES = 0

    def __init__(self, endpoint: str, api_key: str, client: Any | None = None) -> None:
        if client is not None:
            self._client = client
            return

        try:
            from openai import AsyncOpenAI  # type: ignore[import-not-found]
        except ModuleNotFoundError as exc:
            raise RuntimeError("openai package is required for INFERENCE_BACKEND=remote") from exc

        self._client = AsyncOpenAI(
            base_url=endpoint,
            api_key=api_key,
            max_retries=self._MAX_API_RETRIES,
        )

    async def generate(self, messages: list[ChatMessage], params: CompletionParams) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=params.model,
                messages=[message.model_dump() for message in messages],
                temperature=params.temperature,
                max_tokens=params.max_tokens,
            )
        except Exception as exc:
            status_code = self._status_code(exc)
            if status_code is None:
                raise
            inference_call_counters["failure"] += 1
            logger.warning(
                "inference_call",
                extra={
                    "outcome": "failure",
                    "error_class": "provider_error",
                    "status_code": status_code,
                    "model": params.model,
                },
            )
            body = getattr(exc, "body", None)
            raise ProviderError(self._error_message(body), details=body) from exc

        content = self._extract_content(response)
        if content is None:
            inference_call_counters["failure"] += 1
            logger.warning(
                "inference_call",
                extra={
                    "outcome": "failure",
                    "error_class": "unexpected_response_shape",
                    "model": params.model,
                },
            )
            details = self._to_jsonable(response)
            raise ProviderError(self._error_message(details), details=details)

        inference_call_counters["success"] += 1
        logger.info(
            "inference_call",
            extra={
                "outcome": "success",
                "model": params.model,
                "content_length": len(content),
            },
        )
        return content

    @staticmethod
    def _status_code(exc: Exception) -> int | None:
        status_code = getattr(exc, "status_code", None)
        if isinstance(status_code, int):
            return status_code

        response = getattr(exc, "response", None)
        if response is not None:
            response_status_code = getattr(response, "status_code", None)
            if isinstance(response_status_code, int):
                return response_status_code

        return None

    @staticmethod
    def _error_message(body: Any) -> str | None:
        if not isinstance(body, dict):
            return None
        error = body.get("error", body)
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
        return None

    @staticmethod
    def _extract_content(response: Any) -> str | None:
        if isinstance(response, dict):
            choices = response.get("choices")
            if not isinstance(choices, list) or not choices:
                return None
            message = choices[0].get("message") if isinstance(choices[0], dict) else None
            content = message.get("content") if isinstance(message, dict) else None
            return content if isinstance(content, str) else None

        choices = getattr(response, "choices", None)
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content if isinstance(content, str) else None

    @staticmethod
    def _to_jsonable(response: Any) -> Any:
        model_dump = getattr(response, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        if isinstance(response, (dict, list, str, int, float, bool)) or response is None:
            return response
        return repr(response)
