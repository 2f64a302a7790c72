"""Recipe API endpoints guarded by a shared password."""

from __future__ import annotations

import asyncio
import logging
import secrets
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from recipe_catalog.api.models import PasswordPayload, RecipeSubmission
from recipe_catalog.domain.errors import InvalidInputError, UnauthorizedError
from recipe_catalog.domain.recipes import parse_recipe

if TYPE_CHECKING:
    from recipe_catalog.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def slow_down(request: Request) -> None:
    """Delay clients that have exceeded the request budget for the window."""
    container = _get_container(request)
    client_key = request.client.host if request.client else "unknown"
    delay = container.speed_limiter.hit(client_key)
    if delay > 0:
        logger.info("Slowing down %s by %.1fs", client_key, delay)
        await asyncio.sleep(delay)


async def _require_password(
    container: AppContainer, password: object, method: str
) -> None:
    expected = container.settings.recipe_password
    if isinstance(password, str) and secrets.compare_digest(
        password.encode(), expected.encode()
    ):
        return
    await asyncio.sleep(container.settings.unauthorized_delay_seconds)
    logger.warning("Attempted %s with incorrect password denied.", method)
    raise UnauthorizedError("Incorrect password.")


@router.get("")
async def list_recipes(request: Request) -> list[dict[str, object]]:
    """Return every cached recipe."""
    return _get_container(request).catalog_service.list_recipes()


@router.get("/text", response_class=PlainTextResponse)
async def recipes_text(request: Request) -> PlainTextResponse:
    """Return the recipe book as text with ingredient keywords highlighted."""
    return PlainTextResponse(_get_container(request).catalog_service.render_text())


@router.post("/recipe", dependencies=[Depends(slow_down)])
async def save_recipe(
    submission: RecipeSubmission, request: Request
) -> dict[str, object]:
    """Create a recipe, or replace one when the edit flag is set."""
    container = _get_container(request)
    await _require_password(container, submission.password, "POST")
    recipe = parse_recipe(submission.recipe_payload())
    service = container.catalog_service
    if submission.edit:
        if not submission.previous_name:
            raise InvalidInputError("Invalid recipe: previousName is required to edit")
        saved = await service.replace(recipe, submission.previous_name)
    else:
        saved = await service.add(recipe)
    return saved.to_document()


@router.delete("/recipe/{name:path}", dependencies=[Depends(slow_down)])
async def delete_recipe(
    name: str, request: Request, payload: PasswordPayload | None = None
) -> str:
    """Delete a recipe by name and return the name."""
    container = _get_container(request)
    password = payload.password if payload else None
    await _require_password(container, password, "DELETE")
    return await container.catalog_service.delete(name)
