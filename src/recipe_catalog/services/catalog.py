"""Recipe catalog service: write-through cache over the recipe store."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeVar

from recipe_catalog.domain.errors import (
    InvalidInputError,
    RecipeConflictError,
    RecipeNotFoundError,
    RecipeStoreError,
)
from recipe_catalog.domain.recipe_book import RecipeBook
from recipe_catalog.domain.recipes import Recipe, parse_recipe

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class RecipeRepository(Protocol):
    """Persistence interface for recipe documents."""

    def insert_recipe(self, document: dict[str, object]) -> None:
        """Store a new recipe document."""

    def replace_recipe(self, previous_name: str, document: dict[str, object]) -> None:
        """Replace the document stored under previous_name."""

    def delete_recipe(self, name: str) -> None:
        """Delete the document with the given name. Missing names are a no-op."""

    def list_recipes(self) -> list[dict[str, object]]:
        """Return every stored document in arrival order."""


class CacheState(Enum):
    """Lifecycle of the in-memory recipe book."""

    LOADING = "loading"
    READY = "ready"


@dataclass
class RecipeCatalogService:
    """Keeps the recipe book in step with the recipe store.

    Writes go to the store first and only touch the book once the store call
    succeeds. Reloads and writes take the same lock, so a reload never
    interleaves with a write.
    """

    repository: RecipeRepository
    book: RecipeBook = field(default_factory=RecipeBook)
    state: CacheState = CacheState.LOADING
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    def list_recipes(self) -> list[dict[str, object]]:
        """Return the cached recipes as JSON documents."""
        return self.book.snapshot()

    def render_text(self) -> str:
        """Return the highlighted text rendering of the cached book."""
        return self.book.render_text()

    async def add(self, recipe: Recipe) -> Recipe:
        """Persist a new recipe, then cache it."""
        async with self._lock:
            if recipe.name in self.book:
                raise RecipeConflictError(recipe.name)
            await self._call_store(
                "store", self.repository.insert_recipe, recipe.to_document()
            )
            self.book.add(recipe)
        logger.info("Added recipe %s", recipe.name)
        return recipe

    async def replace(self, recipe: Recipe, previous_name: str) -> Recipe:
        """Persist an edited recipe over previous_name, then update the cache."""
        async with self._lock:
            if previous_name not in self.book:
                raise RecipeNotFoundError(previous_name)
            if recipe.name != previous_name and recipe.name in self.book:
                raise RecipeConflictError(recipe.name)
            await self._call_store(
                "update",
                self.repository.replace_recipe,
                previous_name,
                recipe.to_document(),
            )
            self.book.replace_recipe(recipe, previous_name)
        logger.info("Replaced recipe %s with %s", previous_name, recipe.name)
        return recipe

    async def delete(self, name: str) -> str:
        """Delete a recipe from the store, then from the cache."""
        async with self._lock:
            await self._call_store("delete", self.repository.delete_recipe, name)
            removed = self.book.delete_recipe(name)
        if removed:
            logger.info("Deleted recipe %s", name)
        else:
            logger.info("Delete of unknown recipe %s was a no-op", name)
        return name

    async def reload(self) -> bool:
        """Rebuild the book from the store.

        The book is swapped only when every stored document parses. On any
        failure the previous contents stay in place and False is returned.
        """
        async with self._lock:
            try:
                documents = await asyncio.to_thread(self.repository.list_recipes)
            except Exception:
                logger.exception("Failed to reload recipes from the store")
                return False
            try:
                recipes = [parse_recipe(document) for document in documents]
            except InvalidInputError as exc:
                logger.error("Discarded recipe reload: %s", exc)
                return False
            self.book.reset(recipes)
            self.state = CacheState.READY
        logger.info("Reloaded %d recipes", len(recipes))
        return True

    async def run_periodic_reload(self, interval_seconds: float) -> None:
        """Reload the book every interval until cancelled."""
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                await self.reload()
            except Exception:
                logger.exception("Periodic recipe reload failed")

    async def resave_all(self) -> int:
        """Write every cached recipe back to the store under its own name.

        Used to bring stored documents up to the current schema.
        """
        async with self._lock:
            recipes = list(self.book)
            for recipe in recipes:
                await self._call_store(
                    "update",
                    self.repository.replace_recipe,
                    recipe.name,
                    recipe.to_document(),
                )
        logger.info("Re-saved %d recipes", len(recipes))
        return len(recipes)

    async def _call_store(
        self, action: str, func: Callable[..., ResultT], *args: object
    ) -> ResultT:
        try:
            return await asyncio.to_thread(func, *args)
        except Exception as exc:
            logger.exception("Recipe store %s failed", action)
            raise RecipeStoreError(
                f"Failed to {action} recipe in database."
            ) from exc
