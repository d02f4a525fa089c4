import json

from app.services.inference_base import ChatMessage, CompletionParams

_INGREDIENTS_PREFIX = "Ingredients: "


class StubInferenceClient:
    """Offline client that answers every prompt with a fixed-shape recipe."""

    async def generate(self, messages: list[ChatMessage], params: CompletionParams) -> str:
        prompt = next((m.content for m in messages if m.role == "user"), "")
        ingredient_names = ["water"]
        for line in prompt.splitlines():
            if line.startswith(_INGREDIENTS_PREFIX):
                names = [name.strip() for name in line[len(_INGREDIENTS_PREFIX) :].split(",")]
                ingredient_names = [name for name in names if name] or ingredient_names
                break

        summary_ingredients = " and ".join(ingredient_names[:2]).title()
        recipe = {
            "name": f"Simple {summary_ingredients} Skillet",
            "cookingTime": "25 minutes",
            "ingredients": [f"1 portion {name}" for name in ingredient_names],
            "instructions": [f"Prepare the {name}." for name in ingredient_names]
            + ["Combine everything in a hot pan and cook until done."],
        }
        return json.dumps(recipe)
