"""Category and session schemas — name/color bounds, username stripping."""

import pytest
from pydantic import ValidationError

from taskmanager.schemas.category import CategoryCreate, CategoryUpdate
from taskmanager.schemas.session import UserDTO


@pytest.mark.parametrize("color", ["#ABCDEF", "#abcdef", "#012345"])
def test_valid_color_codes(color):
    assert CategoryCreate(name="X", color_code=color).color_code == color


@pytest.mark.parametrize("color", ["ABCDEF", "#ABCDE", "#ABCDEFF", "#GGGGGG", ""])
def test_invalid_color_codes(color):
    with pytest.raises(ValidationError):
        CategoryCreate(name="X", color_code=color)


def test_name_is_stripped():
    assert CategoryCreate.model_validate(
        {"name": "  Home  ", "colorCode": "#000000"},
    ).name == "Home"


def test_name_length_bound():
    CategoryCreate(name="n" * 50, color_code="#000000")
    with pytest.raises(ValidationError):
        CategoryCreate(name="n" * 51, color_code="#000000")


def test_update_validates_only_present_fields():
    assert CategoryUpdate.model_validate({"colorCode": "#FFFFFF"}).name is None
    with pytest.raises(ValidationError):
        CategoryUpdate.model_validate({"name": "   "})


def test_username_stripped_and_required():
    assert UserDTO(username="  alice ").username == "alice"
    with pytest.raises(ValidationError):
        UserDTO(username="")
