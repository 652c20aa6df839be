"""Parse and normalize model replies into Recipe objects.

Models often wrap JSON in Markdown code fences and do not always respect the
object-vs-array instruction, so parsing is lenient at the top level:

1. Strip ```json / ``` fence markers
2. Parse JSON; a single object becomes a one-element list
3. Fill defaults field by field for every element

Only a top-level failure (invalid JSON, or JSON that is neither object nor
array) raises ParseError. A malformed element degrades to a defaulted recipe.
"""

import json
import re
from typing import Any, List

from src.models.models import Recipe
from src.utils.errors import ParseError
from src.utils.logger import logger

# Only the fences wrapping the whole reply; backticks inside string values are content
_OPENING_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"\r?\n?```\s*$")

DEFAULT_DESCRIPTION = "A delicious recipe"
DEFAULT_COOK_TIME = "30 minutes"
DEFAULT_DIFFICULTY = "Medium"
DEFAULT_TIPS = "Enjoy your cooking!"


def strip_code_fences(content: str) -> str:
    """Remove Markdown code-fence markers and surrounding whitespace."""
    content = _OPENING_FENCE.sub("", content, count=1)
    return _CLOSING_FENCE.sub("", content, count=1).strip()


def _text_or_default(value: Any, default: str) -> str:
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


def _text_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value if item is not None]


def normalize_recipe(data: Any, index: int) -> Recipe:
    """Coerce one parsed element into a complete Recipe.

    Args:
        data: Parsed JSON element. Anything other than an object is treated as empty.
        index: Position in the batch, used for the default name.

    Returns:
        Recipe with every field populated.
    """
    if not isinstance(data, dict):
        logger.debug(f"Recipe element {index} is {type(data).__name__}, using defaults")
        data = {}

    return Recipe(
        name=_text_or_default(data.get("name"), f"Recipe {index + 1}"),
        description=_text_or_default(data.get("description"), DEFAULT_DESCRIPTION),
        ingredients=_text_list(data.get("ingredients")),
        steps=_text_list(data.get("steps")),
        cook_time=_text_or_default(data.get("cookTime"), DEFAULT_COOK_TIME),
        difficulty=_text_or_default(data.get("difficulty"), DEFAULT_DIFFICULTY),
        tips=_text_or_default(data.get("tips"), DEFAULT_TIPS),
    )


def normalize_recipes(raw: str) -> List[Recipe]:
    """Parse a raw model reply into a list of Recipe objects.

    Args:
        raw: Reply text, possibly fenced.

    Returns:
        List of Recipe objects (one per JSON element).

    Raises:
        ParseError: If the cleaned text is not valid JSON, or is a JSON scalar.
    """
    cleaned = strip_code_fences(raw)

    try:
        parsed = json.loads(cleaned)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"Failed to parse recipe response: {e}")
        raise ParseError("Failed to parse recipe data from AI response") from e

    if isinstance(parsed, dict):
        elements = [parsed]
    elif isinstance(parsed, list):
        elements = parsed
    else:
        logger.warning(f"Recipe response is a JSON {type(parsed).__name__}, expected object or array")
        raise ParseError("Failed to parse recipe data from AI response")

    return [normalize_recipe(element, index) for index, element in enumerate(elements)]
