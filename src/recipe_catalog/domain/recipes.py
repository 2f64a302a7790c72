"""Domain models for recipes and their validation."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Annotated, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)

from recipe_catalog.domain.errors import InvalidInputError
from recipe_catalog.domain.highlight import ANSI_BLUE, Marker, highlight, sort_keywords

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Ingredient:
    """An ingredient line and the keywords that refer to it in step text."""

    entry: str
    keywords: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", tuple(sort_keywords(self.keywords)))

    def highlighted(self, marker: Marker = ANSI_BLUE) -> str:
        """Return the entry with its own keywords highlighted."""
        return highlight(self.entry, self.keywords, marker=marker)

    def to_document(self) -> dict[str, object]:
        return {"entry": self.entry, "keywords": list(self.keywords)}


@dataclass(frozen=True)
class Step:
    """A single method step, or a heading that groups the steps after it."""

    text: str
    is_heading: bool = False

    def highlighted(
        self, ingredients: Iterable[Ingredient], marker: Marker = ANSI_BLUE
    ) -> str:
        """Return the step text with every ingredient keyword highlighted."""
        keywords = [keyword for item in ingredients for keyword in item.keywords]
        return highlight(self.text, keywords, marker=marker)

    def to_document(self) -> dict[str, object]:
        return {"text": self.text, "isHeading": self.is_heading}


@dataclass(frozen=True)
class Recipe:
    """A validated recipe. The name is its identity within a recipe book."""

    name: str
    description: str
    tags: tuple[str, ...]
    serves: int
    ingredients: tuple[Ingredient, ...]
    steps: tuple[Step, ...]

    def render_text(self, marker: Marker = ANSI_BLUE) -> str:
        """Render the recipe as text with ingredient keywords highlighted."""
        lines = [
            f"===={self.name.upper()}====",
            self.description,
            "===Ingredients===",
        ]
        lines.extend(ingredient.highlighted(marker) for ingredient in self.ingredients)
        lines.append("===Steps===")
        number = 0
        for step in self.steps:
            text = step.highlighted(self.ingredients, marker)
            if step.is_heading:
                lines.append(f"## {text}")
                continue
            number += 1
            lines.append(f"{number}) {text}")
        return "\n".join(lines) + "\n"

    def to_document(self) -> dict[str, object]:
        """Return the JSON document stored and served for this recipe."""
        return {
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "serves": self.serves,
            "ingredients": [item.to_document() for item in self.ingredients],
            "steps": [step.to_document() for step in self.steps],
        }


class IngredientInput(BaseModel):
    """Untrusted ingredient payload."""

    model_config = ConfigDict(extra="forbid")

    entry: NonEmptyStr
    keywords: list[NonEmptyStr]


class StepInput(BaseModel):
    """Untrusted step payload."""

    model_config = ConfigDict(extra="forbid")

    text: NonEmptyStr
    is_heading: StrictBool = Field(default=False, alias="isHeading")


class RecipeInput(BaseModel):
    """Untrusted recipe payload."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyStr
    description: NonEmptyStr
    tags: list[NonEmptyStr] = Field(min_length=1)
    serves: StrictInt = Field(ge=1)
    ingredients: list[IngredientInput] = Field(min_length=1)
    steps: list[StepInput] = Field(min_length=1)


def parse_ingredient(payload: object) -> Ingredient:
    """Validate an ingredient payload and build an Ingredient."""
    data = _validate(IngredientInput, payload, "ingredient")
    return _build_ingredient(data)


def parse_step(payload: object) -> Step:
    """Validate a step payload and build a Step."""
    data = _validate(StepInput, payload, "step")
    return Step(text=data.text, is_heading=data.is_heading)


def parse_recipe(payload: object) -> Recipe:
    """Validate a recipe payload and build a Recipe.

    Raises InvalidInputError naming every violated field when the payload is
    missing a field, has a mistyped or empty value, or carries unknown keys.
    """
    data = _validate(RecipeInput, payload, "recipe")
    return Recipe(
        name=data.name,
        description=data.description,
        tags=tuple(data.tags),
        serves=data.serves,
        ingredients=tuple(_build_ingredient(item) for item in data.ingredients),
        steps=tuple(
            Step(text=step.text, is_heading=step.is_heading) for step in data.steps
        ),
    )


def _build_ingredient(data: IngredientInput) -> Ingredient:
    return Ingredient(entry=data.entry, keywords=tuple(data.keywords))


def _validate(model: type[ModelT], payload: object, label: str) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInputError(_format_errors(label, exc)) from exc


def _format_errors(label: str, exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or label
        problems.append(f"{location}: {error['msg']}")
    return f"Invalid {label}: " + "; ".join(problems)
