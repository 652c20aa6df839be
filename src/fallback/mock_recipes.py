"""Deterministic fallback recipes.

Used when no OpenRouter key is configured, or when a model reply cannot be
used. Templates are immutable module constants; synthesis is a pure function
of the ingredient list, so the service works with zero configuration and stays
available while the remote model is degraded.
"""

from typing import List, NamedTuple, Sequence, Tuple

from src.models.models import Recipe


class RecipeTemplate(NamedTuple):
    """Fixed recipe procedure parameterized by the ingredient label."""

    name: str
    description: str
    extras: Tuple[str, ...]
    steps: Tuple[str, ...]
    cook_time: str
    difficulty: str
    tips: str


SURPRISE_TEMPLATE = RecipeTemplate(
    name="Fusion {label} Delight",
    description="A creative fusion dish that combines your ingredients in an unexpected way",
    extras=("Seasonings to taste", "Cooking oil"),
    steps=(
        "Prepare all ingredients by washing and chopping as needed",
        "Heat oil in a large pan over medium heat",
        "Combine ingredients in a creative fusion style",
        "Cook while stirring occasionally for 10-15 minutes",
        "Season to taste and serve hot",
    ),
    cook_time="25 minutes",
    difficulty="Medium",
    tips="This fusion approach creates unique flavor combinations. Feel free to experiment with spices!",
)

STANDARD_TEMPLATES: Tuple[RecipeTemplate, ...] = (
    RecipeTemplate(
        name="Classic {label} Skillet",
        description="A hearty, traditional dish featuring your available ingredients",
        extras=("Salt and pepper to taste", "2 tbsp olive oil"),
        steps=(
            "Heat olive oil in a large skillet over medium heat",
            "Add ingredients in order of cooking time needed",
            "Season with salt and pepper",
            "Cook for 15-20 minutes, stirring occasionally",
            "Serve hot and enjoy",
        ),
        cook_time="20 minutes",
        difficulty="Easy",
        tips="This versatile recipe works with many ingredient combinations. "
        "Adjust cooking time based on your ingredients.",
    ),
    RecipeTemplate(
        name="Baked {label} Casserole",
        description="A comforting baked dish that brings out the best in your ingredients",
        extras=("1 cup broth or water", "Herbs and spices to taste"),
        steps=(
            "Preheat oven to 375°F (190°C)",
            "Layer ingredients in a baking dish",
            "Add broth and seasonings",
            "Cover and bake for 30-35 minutes",
            "Let rest for 5 minutes before serving",
        ),
        cook_time="40 minutes",
        difficulty="Easy",
        tips="Casseroles are forgiving and can be customized with whatever ingredients you have on hand.",
    ),
    RecipeTemplate(
        name="Quick {label} Stir-Fry",
        description="A fast and flavorful stir-fry that maximizes the taste of your ingredients",
        extras=("2 tbsp soy sauce", "1 tbsp oil for cooking"),
        steps=(
            "Heat oil in a wok or large pan over high heat",
            "Add harder ingredients first, softer ones later",
            "Stir-fry quickly, keeping ingredients moving",
            "Add soy sauce in the last minute",
            "Serve immediately over rice or noodles",
        ),
        cook_time="15 minutes",
        difficulty="Medium",
        tips="High heat and quick cooking preserve the texture and nutrients of your ingredients.",
    ),
)

LABEL_INGREDIENT_LIMIT = 3


def ingredient_label(ingredients: Sequence[str]) -> str:
    """Join at most the first three ingredients for display in recipe names."""
    return ", ".join(ingredients[:LABEL_INGREDIENT_LIMIT])


def render_template(template: RecipeTemplate, ingredients: Sequence[str]) -> Recipe:
    """Instantiate one template for the given ingredients."""
    portions = [f"1 portion {ingredient}" for ingredient in ingredients]
    return Recipe(
        name=template.name.format(label=ingredient_label(ingredients)),
        description=template.description,
        ingredients=portions + list(template.extras),
        steps=list(template.steps),
        cook_time=template.cook_time,
        difficulty=template.difficulty,
        tips=template.tips,
    )


def synthesize_recipes(ingredients: Sequence[str], surprise: bool = False) -> List[Recipe]:
    """Build fallback recipes without any network access.

    Args:
        ingredients: Ingredient names as entered.
        surprise: If True, return a single fusion recipe. Otherwise three recipes
            (skillet, casserole, stir-fry).

    Returns:
        List of Recipe objects. Never raises for a list of strings.
    """
    ingredients = list(ingredients)
    if surprise:
        return [render_template(SURPRISE_TEMPLATE, ingredients)]
    return [render_template(template, ingredients) for template in STANDARD_TEMPLATES]
