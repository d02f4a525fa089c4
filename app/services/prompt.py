from app.schemas.recipe import RecipeRequest
from app.services.inference_base import ChatMessage

SYSTEM_PROMPT = "You are a helpful chef assistant."

_RESPONSE_INSTRUCTIONS = (
    "In the JSON response, always include a 'serves' field (number), a 'preferences' field "
    "(array of strings), and make sure the recipe name or summary clearly states how many "
    "servings the recipe makes and reflects the preferences if possible. "
    "Respond in JSON with these fields: name (string), serves (number), "
    "preferences (array of strings), cookingTime (string), ingredients (array of strings), "
    "instructions (array of strings)."
)


def compose_prompt(request: RecipeRequest) -> str:
    preferences = ", ".join(request.preferences) if request.preferences else "None"
    lines = [
        f"Generate a detailed cooking recipe for {request.serves} servings using the following:",
        f"Ingredients: {', '.join(request.ingredients)}",
        f"Cooking Style: {request.style}",
        f"Meal Type: {request.meal_type or 'Any'}",
        f"User Preference: {request.why or 'None'}",
        f"Dietary Preferences or Health Goals: {preferences}",
        "",
        _RESPONSE_INSTRUCTIONS,
    ]
    return "\n".join(lines)


def build_messages(request: RecipeRequest) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=compose_prompt(request)),
    ]
