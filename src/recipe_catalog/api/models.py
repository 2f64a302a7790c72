"""Pydantic models for recipe API request envelopes."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class RecipeSubmission(BaseModel):
    """POST body: the recipe fields plus the password and edit flags.

    Recipe fields are left in ``model_extra`` and validated by the domain
    parser after the password check.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    password: object = None
    edit: StrictBool = False
    previous_name: str | None = Field(default=None, alias="previousName")

    def recipe_payload(self) -> dict[str, object]:
        """Return the submitted recipe fields without the envelope keys."""
        return dict(self.model_extra or {})


class PasswordPayload(BaseModel):
    """DELETE body carrying only the shared password."""

    password: object = None
