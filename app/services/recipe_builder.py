from typing import Any

from pydantic import ValidationError

from app.core.config import Settings
from app.schemas.recipe import ModelRecipe, Recipe, RecipeRequest
from app.services.errors import MalformedModelOutput, RecipeGenerationError, UnexpectedFailure
from app.services.inference_base import CompletionParams, InferenceClient
from app.services.prompt import build_messages
from app.services.validation import load_json


async def build_recipe(
    request: RecipeRequest, client: InferenceClient, settings: Settings
) -> Recipe:
    messages = build_messages(request)
    params = CompletionParams(model=settings.inference_model)
    try:
        content = await client.generate(messages, params)
    except RecipeGenerationError:
        raise
    except Exception as exc:
        raise UnexpectedFailure(exc) from exc

    return finalize_recipe(parse_recipe(content), request)


def parse_recipe(content: str) -> ModelRecipe:
    try:
        parsed: Any = load_json(content)
    except (ValueError, RecursionError) as exc:
        raise MalformedModelOutput.parse_failure(content) from exc

    if not isinstance(parsed, dict):
        raise MalformedModelOutput.incomplete(parsed)
    try:
        return ModelRecipe.model_validate(parsed)
    except ValidationError as exc:
        raise MalformedModelOutput.incomplete(parsed) from exc


def finalize_recipe(recipe: ModelRecipe, request: RecipeRequest) -> Recipe:
    """Replace whatever serving count and preferences the model echoed with the caller's."""
    payload = recipe.model_dump(by_alias=True)
    payload["serves"] = request.serves
    payload["preferences"] = list(request.preferences)
    return Recipe.model_validate(payload)
