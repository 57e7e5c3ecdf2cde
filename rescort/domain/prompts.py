from rescort.domain.models import Language


DISH_DETAILS_PROMPT = """
You are a world-class, knowledgeable and detail-oriented culinary assistant.
Given the name of a dish you describe it and explain how to cook it at home.

It is important to include all the ingredients required to complete the recipe,
each with its quantity (e.g. "2 cups all-purpose flour").
Every recipe step should be a single, clear instruction.
Your users are competent cooks but are not professionals.

Write every field of your response, including the name of the dish, in {language}.
Respond only with JSON matching the provided schema."""


DISH_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "The official name of the dish.",
        },
        "description": {
            "type": "string",
            "description": (
                "A captivating and appetizing paragraph about the dish, "
                "its origin, and its flavor profile."
            ),
        },
        "ingredients": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Each entry is a single ingredient with its quantity.",
        },
        "recipe": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Each entry is a single, clear step in the cooking process.",
        },
    },
    "required": ["name", "description", "ingredients", "recipe"],
    "additionalProperties": False,
}


IMAGE_PROMPT = (
    "Photorealistic, delicious-looking professional food photography of {name}. "
    "{description} "
    "Beautifully plated and ready to eat, natural lighting, shallow depth of field."
)


def dish_details_system_prompt(language: Language) -> str:
    # English names keep the model from answering in a mix of scripts.
    names = {Language.en: "English", Language.hi: "Hindi", Language.ur: "Urdu"}
    return DISH_DETAILS_PROMPT.format(language=names[language]).strip()


def dish_details_user_prompt(name: str) -> str:
    return f'Provide detailed information for the dish: "{name}".'


def dish_image_prompt(name: str, description: str) -> str:
    return IMAGE_PROMPT.format(name=name, description=description.strip())
