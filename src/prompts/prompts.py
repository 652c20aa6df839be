"""Prompt templates for recipe generation.

Provides a factory function that renders the user prompt sent to the completion
model. Two templates exist: normal mode asks for three practical recipes as a
JSON array, surprise mode asks for one unconventional recipe as a JSON object.
Both spell out the exact shape parsed by src.parsers.recipe_parser.
"""

from typing import Sequence

NO_DIETARY_RESTRICTIONS = "no specific dietary restrictions"

_RECIPE_SHAPE = """{{
  "name": "{name_hint}",
  "description": "{description_hint}",
  "ingredients": ["ingredient 1 with quantity", "ingredient 2 with quantity"],
  "steps": ["Step 1", "Step 2", "Step 3"],
  "cookTime": "X minutes",
  "difficulty": "Easy/Medium/Hard",
  "tips": "Helpful tips or substitutions"
}}"""

_SURPRISE_TEMPLATE = """You are a creative and innovative chef. A user has these ingredients: {ingredients}. Their dietary preference is: {dietary}.

Create 1 VERY CREATIVE and UNEXPECTED recipe that combines these ingredients in a surprising way. Think outside the box - maybe fusion cuisine, unusual combinations, or creative presentations.

Return ONLY a valid JSON object with this exact structure:
{shape}

Make it fun, creative, and delicious!"""

_STANDARD_TEMPLATE = """You are a helpful and creative home chef. A user has these ingredients: {ingredients}. Their dietary preference is: {dietary}.

Generate 3 practical, delicious recipes that use these ingredients. Make them varied in style and cooking method.

Return ONLY a valid JSON array with this exact structure:
[
{shape}
]

Focus on practical, achievable recipes that taste great!"""


def _describe_dietary(dietary: str) -> str:
    """Render the dietary tag, spelling out the unconstrained case."""
    return NO_DIETARY_RESTRICTIONS if dietary == "none" else dietary


def _indent(text: str, prefix: str = "  ") -> str:
    return "\n".join(prefix + line for line in text.splitlines())


def build_recipe_prompt(ingredients: Sequence[str], dietary: str, surprise: bool = False) -> str:
    """Build the completion prompt for a generation request.

    Ingredient text is joined as-is; the prompt goes to a remote model and is
    never executed, so no escaping is applied.

    Args:
        ingredients: Ingredient names in the order the user entered them.
        dietary: Free-form dietary tag, "none" for no restriction.
        surprise: If True, ask for one creative recipe as a JSON object.
            Otherwise ask for three recipes as a JSON array.

    Returns:
        str: Prompt instructing the model to reply with JSON only.
    """
    ingredient_text = ", ".join(ingredients)
    dietary_text = _describe_dietary(dietary)

    if surprise:
        shape = _RECIPE_SHAPE.format(
            name_hint="Creative Recipe Name",
            description_hint="Brief description highlighting what makes it unique",
        )
        return _SURPRISE_TEMPLATE.format(ingredients=ingredient_text, dietary=dietary_text, shape=shape)

    shape = _RECIPE_SHAPE.format(
        name_hint="Recipe Name",
        description_hint="Brief description of the dish",
    )
    return _STANDARD_TEMPLATE.format(ingredients=ingredient_text, dietary=dietary_text, shape=_indent(shape))
