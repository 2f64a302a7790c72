"""Tests for recipe domain models and validation."""

import pytest

from recipe_catalog.domain.errors import InvalidInputError
from recipe_catalog.domain.highlight import Marker
from recipe_catalog.domain.recipes import (
    Ingredient,
    Step,
    parse_ingredient,
    parse_recipe,
    parse_step,
)
from tests.conftest import recipe_payload

BRACKETS = Marker(open="[", close="]")


def test_parse_recipe_builds_domain_model() -> None:
    recipe = parse_recipe(recipe_payload())

    assert recipe.name == "Toast"
    assert recipe.serves == 2
    assert recipe.tags == ("breakfast",)
    assert recipe.ingredients[0] == Ingredient("2 slices of bread", ("bread",))
    assert recipe.steps[1] == Step("Spread the butter on the bread.")


def test_parse_recipe_copies_input() -> None:
    payload = recipe_payload()
    recipe = parse_recipe(payload)

    payload["tags"].append("lunch")  # type: ignore[union-attr]
    payload["ingredients"][0]["keywords"].append("loaf")  # type: ignore[index]

    assert recipe.tags == ("breakfast",)
    assert recipe.ingredients[0].keywords == ("bread",)


def test_parse_recipe_missing_name_fails() -> None:
    payload = recipe_payload()
    del payload["name"]

    with pytest.raises(InvalidInputError, match="name"):
        parse_recipe(payload)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("serves", 0),
        ("serves", "2"),
        ("serves", True),
        ("name", ""),
        ("name", 5),
        ("description", ""),
        ("tags", []),
        ("tags", [""]),
        ("ingredients", []),
        ("steps", []),
    ],
)
def test_parse_recipe_rejects_bad_fields(field: str, value: object) -> None:
    with pytest.raises(InvalidInputError):
        parse_recipe(recipe_payload(**{field: value}))


def test_parse_recipe_rejects_unknown_fields() -> None:
    with pytest.raises(InvalidInputError, match="color"):
        parse_recipe(recipe_payload(color="red"))


def test_parse_recipe_rejects_non_mapping() -> None:
    with pytest.raises(InvalidInputError):
        parse_recipe(["Toast"])


def test_parse_ingredient_requires_non_empty_keywords() -> None:
    assert parse_ingredient({"entry": "salt", "keywords": []}).keywords == ()
    with pytest.raises(InvalidInputError):
        parse_ingredient({"entry": "salt", "keywords": [""]})
    with pytest.raises(InvalidInputError):
        parse_ingredient({"entry": "", "keywords": ["salt"]})


def test_parse_step_defaults_heading_flag() -> None:
    assert parse_step({"text": "Prep"}) == Step("Prep", is_heading=False)
    assert parse_step({"text": "Sauce", "isHeading": True}).is_heading
    with pytest.raises(InvalidInputError):
        parse_step({"text": "Prep", "isHeading": "yes"})


def test_ingredient_keywords_sorted_longest_first() -> None:
    ingredient = Ingredient("3 eggs", ("egg", "egg white", "eggs"))

    assert ingredient.keywords == ("egg white", "eggs", "egg")


def test_step_highlights_keywords_from_all_ingredients() -> None:
    ingredients = [
        Ingredient("2 eggs", ("egg",)),
        Ingredient("1 egg white", ("egg white",)),
    ]
    step = Step("Fold the egg white into the egg yolk.")

    assert (
        step.highlighted(ingredients, BRACKETS)
        == "Fold the [egg white] into the [egg] yolk."
    )


def test_render_text_numbers_steps_and_marks_headings() -> None:
    recipe = parse_recipe(
        recipe_payload(
            steps=[
                {"text": "Bread", "isHeading": True},
                {"text": "Toast the bread."},
                {"text": "Butter it."},
            ]
        )
    )

    text = recipe.render_text(BRACKETS)

    assert text == (
        "====TOAST====\n"
        "Crisp bread with butter.\n"
        "===Ingredients===\n"
        "2 slices of [bread]\n"
        "1 tbsp [butter]\n"
        "===Steps===\n"
        "## [Bread]\n"
        "1) Toast the [bread].\n"
        "2) [Butter] it.\n"
    )


def test_to_document_matches_parsed_payload() -> None:
    payload = recipe_payload()

    assert parse_recipe(payload).to_document() == payload
