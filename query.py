#!/usr/bin/env python3
"""Ad hoc query runner for the SmartChef recipe generator.

Generate recipes directly without starting the API server.

Usage:
    python query.py chicken rice broccoli
    python query.py --dietary vegetarian tomatoes basil pasta
    python query.py --surprise eggs avocado
    python query.py --debug eggs tomatoes  # Show full JSON result

Features:
- Direct generator execution via asyncio.run()
- Markdown rendering of recipes with rich
- Debug mode to display the full JSON result with provenance
- Works without OPENROUTER_API_KEY (fallback recipes)
"""

import asyncio
import sys

from rich.console import Console
from rich.markdown import Markdown

from src.models.models import GenerationResult, Recipe
from src.services.recipe_generator import initialize_recipe_generator
from src.utils.logger import logger

console = Console()

USAGE = "Usage: python query.py [--debug] [--surprise] [--dietary TAG] <ingredient> [<ingredient> ...]"


def format_recipe(recipe: Recipe, number: int) -> str:
    """Render one recipe as Markdown."""
    lines = [
        f"## {number}. {recipe.name}",
        "",
        recipe.description,
        "",
        f"**Cook time:** {recipe.cook_time} | **Difficulty:** {recipe.difficulty}",
        "",
        "### Ingredients",
    ]
    lines.extend(f"- {ingredient}" for ingredient in recipe.ingredients)
    lines.extend(["", "### Steps"])
    lines.extend(f"{index}. {step}" for index, step in enumerate(recipe.steps, 1))
    lines.extend(["", f"> {recipe.tips}", ""])
    return "\n".join(lines)


def format_result(result: GenerationResult) -> str:
    """Render a whole generation result as Markdown."""
    header = f"# Recipes ({result.source})\n"
    return header + "\n".join(format_recipe(recipe, i) for i, recipe in enumerate(result.recipes, 1))


def run_query(ingredients: list[str], dietary: str = "none", surprise: bool = False, debug: bool = False) -> None:
    """Generate recipes once and print them.

    Args:
        ingredients: Ingredient names.
        dietary: Dietary tag, "none" for no restriction.
        surprise: Request a single unconventional recipe.
        debug: If True, display the full JSON result.
    """
    try:
        generator = initialize_recipe_generator()
        logger.info(f"Running query: ingredients={ingredients}, dietary={dietary}, surprise={surprise}")

        result = asyncio.run(generator.generate(ingredients, dietary, surprise=surprise))

        console.print()
        if debug:
            console.print("[bold cyan]Debug Mode: Full Result[/bold cyan]")
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print_json(data=result.model_dump(mode="json", by_alias=True))
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print()

        console.print(Markdown(format_result(result)))

    except KeyboardInterrupt:
        logger.info("\nQuery interrupted by user.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        sys.exit(1)


def parse_args(argv: list[str]) -> tuple[list[str], str, bool, bool]:
    """Parse flags and ingredients from argv (without the program name)."""
    debug_mode = False
    surprise_mode = False
    dietary = "none"
    index = 0

    while index < len(argv) and argv[index].startswith("--"):
        flag = argv[index]
        if flag == "--debug":
            debug_mode = True
        elif flag == "--surprise":
            surprise_mode = True
        elif flag == "--dietary":
            index += 1
            if index >= len(argv):
                raise ValueError("--dietary flag requires a value")
            dietary = argv[index]
        else:
            raise ValueError(f"Unknown flag: {flag}")
        index += 1

    ingredients = [arg.strip() for arg in argv[index:] if arg.strip()]
    if not ingredients:
        raise ValueError("No ingredients provided")
    return ingredients, dietary, surprise_mode, debug_mode


if __name__ == "__main__":
    try:
        ingredients, dietary, surprise, debug = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print(USAGE)
        sys.exit(1)

    run_query(ingredients, dietary=dietary, surprise=surprise, debug=debug)
