"""Failures raised while turning a recipe request into a response.

Each exception knows the HTTP status and JSON body it maps to, so the route
handler can convert any of them without inspecting the failure kind.
"""

from typing import Any


class RecipeValidationError(ValueError):
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class RecipeGenerationError(RuntimeError):
    status_code = 500
    error_class = "generation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class ProviderError(RecipeGenerationError):
    """The inference provider reported a failure or answered with an unusable shape."""

    error_class = "provider_error"
    DEFAULT_MESSAGE = "Inference provider error."

    def __init__(self, message: str | None, details: Any = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE)
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


class MalformedModelOutput(RecipeGenerationError):
    """The provider answered, but the content is not a usable recipe."""

    error_class = "malformed_model_output"
    PARSE_FAILURE = "Failed to parse recipe from AI response."
    INCOMPLETE = "Incomplete recipe data from AI."

    def __init__(self, message: str, raw: Any) -> None:
        super().__init__(message)
        self.raw = raw

    @classmethod
    def parse_failure(cls, raw_text: str) -> "MalformedModelOutput":
        return cls(cls.PARSE_FAILURE, raw_text)

    @classmethod
    def incomplete(cls, parsed: Any) -> "MalformedModelOutput":
        return cls(cls.INCOMPLETE, parsed)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "raw": self.raw}


class UnexpectedFailure(RecipeGenerationError):
    error_class = "unexpected_failure"

    def __init__(self, cause: BaseException) -> None:
        detail = str(cause) or cause.__class__.__name__
        super().__init__(f"Failed to generate recipe. {detail}")
        self.details = {"type": cause.__class__.__name__, "message": str(cause)}

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}
