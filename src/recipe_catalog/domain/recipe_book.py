"""In-memory recipe book."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from recipe_catalog.domain.highlight import ANSI_BLUE, Marker
from recipe_catalog.domain.recipes import Recipe


@dataclass
class RecipeBook:
    """Ordered collection of recipes kept in arrival order."""

    recipes: list[Recipe] = field(default_factory=list)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    def __contains__(self, name: object) -> bool:
        return any(recipe.name == name for recipe in self.recipes)

    def get(self, name: str) -> Recipe | None:
        """Return the recipe with the given name, if present."""
        return next((recipe for recipe in self.recipes if recipe.name == name), None)

    def add(self, recipe: Recipe) -> None:
        self.recipes.append(recipe)

    def replace_recipe(self, recipe: Recipe, previous_name: str) -> None:
        """Drop the recipe stored under previous_name and append the new one."""
        self.delete_recipe(previous_name)
        self.add(recipe)

    def delete_recipe(self, name: str) -> bool:
        """Remove a recipe by name. Returns False when nothing matched."""
        for index, recipe in enumerate(self.recipes):
            if recipe.name == name:
                del self.recipes[index]
                return True
        return False

    def reset(self, recipes: Iterable[Recipe]) -> None:
        """Replace the whole collection in one assignment."""
        self.recipes = list(recipes)

    def clear(self) -> None:
        self.recipes = []

    def snapshot(self) -> list[dict[str, object]]:
        """Return the collection as JSON documents."""
        return [recipe.to_document() for recipe in self.recipes]

    def render_text(self, marker: Marker = ANSI_BLUE) -> str:
        """Render every recipe as highlighted text."""
        parts = ["=====RECIPE BOOK=====\n"]
        parts.extend(recipe.render_text(marker) for recipe in self.recipes)
        return "\n".join(parts)
