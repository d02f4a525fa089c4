import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.schemas.recipe import RecipeRequest
from app.services.errors import RecipeGenerationError, RecipeValidationError, UnexpectedFailure
from app.services.inference_base import InferenceClient
from app.services.inference_factory import get_inference_client
from app.services.recipe_builder import build_recipe
from app.services.validation import load_json, parse_recipe_request

router = APIRouter()
logger = logging.getLogger(__name__)

generate_api_counters = {
    "success": 0,
    "invalid_request": 0,
    "failure": 0,
}


async def _read_body(http_request: Request) -> Any:
    raw = await http_request.body()
    if not raw.strip():
        return {}
    try:
        return load_json(raw)
    except (ValueError, RecursionError) as exc:
        raise RecipeValidationError("Invalid JSON body") from exc


def _request_shape_fields(request: RecipeRequest) -> dict[str, Any]:
    return {
        "ingredients_count": len(request.ingredients),
        "serves": request.serves,
        "preferences_count": len(request.preferences),
    }


@router.post("/generate-recipe")
async def generate_recipe(
    http_request: Request,
    settings: Settings = Depends(get_settings),
    client: InferenceClient = Depends(get_inference_client),
) -> JSONResponse:
    try:
        body = await _read_body(http_request)
        request = parse_recipe_request(body)
    except RecipeValidationError as exc:
        generate_api_counters["invalid_request"] += 1
        logger.info(
            "api_recipe_generation",
            extra={"outcome": "invalid_request", "error": exc.message},
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    try:
        recipe = await build_recipe(request, client, settings)
    except RecipeGenerationError as exc:
        failure = exc
    except Exception as exc:
        failure = UnexpectedFailure(exc)
        failure.__cause__ = exc
    else:
        generate_api_counters["success"] += 1
        logger.info(
            "api_recipe_generation",
            extra={"outcome": "success", **_request_shape_fields(request)},
        )
        return JSONResponse(content=recipe.model_dump(by_alias=True))

    generate_api_counters["failure"] += 1
    logger.error(
        "api_recipe_generation",
        extra={
            "outcome": "failure",
            "error_class": failure.error_class,
            "error": failure.message,
            **_request_shape_fields(request),
        },
        exc_info=failure.__cause__ or failure,
    )
    return JSONResponse(status_code=failure.status_code, content=failure.to_payload())
