"""Supabase-backed recipe document store."""

from dataclasses import dataclass

from supabase import Client

from recipe_catalog.domain.errors import RecipeStoreError
from recipe_catalog.services.catalog import RecipeRepository

_STORE_MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Stores one row per recipe, keyed logically by name.

    Nested ingredients and steps live in jsonb columns, so each row mirrors
    the recipe document exactly.
    """

    client: Client
    table_name: str = "recipes"

    def insert_recipe(self, document: dict[str, object]) -> None:
        """Insert a recipe document."""
        response = self.client.table(self.table_name).insert(document).execute()
        if not response.data:
            raise RecipeStoreError(f"Failed to insert recipe {document.get('name')}")

    def replace_recipe(self, previous_name: str, document: dict[str, object]) -> None:
        """Overwrite the row stored under previous_name."""
        response = (
            self.client.table(self.table_name)
            .update(document)
            .eq("name", previous_name)
            .execute()
        )
        if not response.data:
            raise RecipeStoreError(f"No stored recipe named {previous_name}")

    def delete_recipe(self, name: str) -> None:
        """Delete a row by name. Deleting a missing name succeeds."""
        self.client.table(self.table_name).delete().eq("name", name).execute()

    def list_recipes(self) -> list[dict[str, object]]:
        """Return every recipe document in insertion order."""
        response = (
            self.client.table(self.table_name).select("*").order("id").execute()
        )
        return [_parse_document(row) for row in response.data or []]


def _parse_document(row: dict[str, object]) -> dict[str, object]:
    """Drop store-managed columns so the row matches the recipe document."""
    return {
        key: value
        for key, value in row.items()
        if key not in _STORE_MANAGED_COLUMNS
    }
