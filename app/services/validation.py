import json
from typing import Any

from pydantic import ValidationError

from app.schemas.recipe import RecipeRequest
from app.services.errors import RecipeValidationError

# Order in which invalid fields are reported; only the first one is surfaced.
FIELD_ORDER = ("ingredients", "style", "mealType", "why", "serves", "preferences")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {token}")


def load_json(raw: str | bytes) -> Any:
    """Parse JSON text, rejecting NaN and Infinity the way strict JSON parsers do."""
    return json.loads(raw, parse_constant=_reject_constant)


def parse_recipe_request(body: Any) -> RecipeRequest:
    if not isinstance(body, dict):
        body = {}
    try:
        return RecipeRequest.model_validate(body)
    except ValidationError as exc:
        failing = {error["loc"][0] for error in exc.errors() if error["loc"]}
        field = next((name for name in FIELD_ORDER if name in failing), FIELD_ORDER[0])
        raise RecipeValidationError(f"Missing or invalid {field}") from exc


def validate_recipe_request(body: Any) -> str | None:
    """Return the message for the first invalid field, or None if the body is usable.

    Optional fields are only checked when the key is present; an explicit null
    counts as present.
    """
    try:
        parse_recipe_request(body)
    except RecipeValidationError as exc:
        return exc.message
    return None
