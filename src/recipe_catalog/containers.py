"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import ClientOptions, create_client

from recipe_catalog.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from recipe_catalog.config import Settings
from recipe_catalog.services.catalog import RecipeCatalogService
from recipe_catalog.services.rate_limit import SpeedLimiter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: RecipeCatalogService
    speed_limiter: SpeedLimiter
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(schema=resolved_settings.supabase_schema),
    )
    recipe_repository = SupabaseRecipeRepository(
        supabase_client, table_name=resolved_settings.recipes_table
    )
    catalog_service = RecipeCatalogService(recipe_repository)
    speed_limiter = SpeedLimiter(
        window_seconds=resolved_settings.rate_limit_window_seconds,
        delay_after=resolved_settings.rate_limit_delay_after,
        delay_ms=resolved_settings.rate_limit_delay_ms,
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        speed_limiter=speed_limiter,
        close_resources=close_resources,
    )
