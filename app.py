"""SmartChef HTTP API - recipe generation endpoint.

Single entry point for the web client:
- POST /api/generate-recipes validates ingredients, runs the generator,
  assigns recipe ids and reports the source ("ai" or "mock")
- GET /health reports whether an OpenRouter key is configured

Error mapping:
- Invalid request body: 400 {"error": ...}
- OpenRouter non-2xx: 503 with a fixed "temporarily unavailable" message
- Anything else: 500 {"error": <message>}

Run with: python app.py
"""

import time
from functools import lru_cache

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.models.models import ErrorResponse, GenerationRequest, GenerationResponse, RecipeOut
from src.services.recipe_generator import RecipeGenerator, initialize_recipe_generator
from src.utils.config import config
from src.utils.errors import RemoteServiceError
from src.utils.logger import logger

SERVICE_UNAVAILABLE_MESSAGE = "AI service temporarily unavailable. Please try again later."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while generating recipes"
INVALID_REQUEST_MESSAGE = "Please provide at least one ingredient"


@lru_cache(maxsize=1)
def get_recipe_generator() -> RecipeGenerator:
    """Shared generator instance (overridden in tests)."""
    return initialize_recipe_generator()


def _validation_message(exc: RequestValidationError) -> str:
    """Pick the user-facing 400 message.

    Validator messages win (without pydantic's "Value error, " prefix). A type
    error on another body field names that field; anything else (malformed
    JSON, missing body) gets the ingredient prompt.
    """
    errors = exc.errors()
    for error in errors:
        ctx_error = (error.get("ctx") or {}).get("error")
        if error.get("type") == "value_error" and ctx_error:
            return str(ctx_error)

    for error in errors:
        loc = error.get("loc") or ()
        if len(loc) > 1 and loc[0] == "body" and isinstance(loc[1], str) and loc[1] != "ingredients":
            return f"Invalid value for {loc[1]}"
    return INVALID_REQUEST_MESSAGE


def _assign_ids(result) -> list[RecipeOut]:
    """Attach millisecond-timestamp ids, offset by position."""
    base_id = int(time.time() * 1000)
    return [
        RecipeOut(id=base_id + index, **recipe.model_dump())
        for index, recipe in enumerate(result.recipes)
    ]


app = FastAPI(title=config.APP_TITLE, version="1.0.0")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.post(
    "/api/generate-recipes",
    response_model=GenerationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def generate_recipes(
    request: GenerationRequest,
    generator: RecipeGenerator = Depends(get_recipe_generator),
):
    """Generate recipes from the submitted ingredients."""
    logger.info(
        f"Generating recipes: ingredients={len(request.ingredients)}, "
        f"dietary={request.dietary}, surprise={request.surprise_me}"
    )
    try:
        result = await generator.generate(request.ingredients, request.dietary, surprise=request.surprise_me)
    except RemoteServiceError as e:
        logger.error(f"Error generating recipes: {e}")
        return JSONResponse(status_code=503, content={"error": SERVICE_UNAVAILABLE_MESSAGE})
    except Exception as e:
        logger.error(f"Error generating recipes: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(e) or UNEXPECTED_ERROR_MESSAGE})

    return GenerationResponse(recipes=_assign_ids(result), source=result.source)


@app.get("/health")
async def health(generator: RecipeGenerator = Depends(get_recipe_generator)) -> dict:
    return {"status": "ok", "mode": generator.mode}


if __name__ == "__main__":
    logger.info(f"Starting SmartChef recipe service on port {config.PORT}")
    logger.info(f"OpenRouter key configured: {config.has_api_key}")
    logger.info(f"API docs available at: http://localhost:{config.PORT}/docs")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
