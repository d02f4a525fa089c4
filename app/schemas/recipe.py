from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class RecipeRequest(BaseModel):
    """Effective request values, after validation and defaulting."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    ingredients: list[StrictStr] = Field(min_length=1, strict=True)
    style: StrictStr
    meal_type: StrictStr = Field(alias="mealType")
    why: StrictStr
    serves: int = Field(default=2, gt=0, strict=True)
    preferences: list[StrictStr] = Field(default_factory=list, strict=True)

    @field_validator("serves", mode="before")
    @classmethod
    def integral_float_serves(cls, value: Any) -> Any:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ModelRecipe(BaseModel):
    """Recipe fields the inference provider must supply.

    Anything else the model returns is kept as-is and passed back to the caller.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1, strict=True)
    cooking_time: str = Field(alias="cookingTime", min_length=1, strict=True)
    ingredients: list[Any] = Field(strict=True)
    instructions: list[Any] = Field(strict=True)


class Recipe(ModelRecipe):
    serves: int = Field(gt=0)
    preferences: list[str]
