# =========================
# FILE: cookbook/api/schemas.py
# =========================
from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

# int first so whole numbers come back out as ints; strict so JSON booleans are rejected
Amount = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)],
]


class ParseRequest(BaseModel):
    input: str = Field(..., examples=["-Cold- Br3ad"])


class ParseResponse(BaseModel):
    msg: str


class RequiredItemIn(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: Amount


class IngredientIn(BaseModel):
    type: Literal["ingredient"]
    name: str = Field(..., min_length=1)
    cookTime: Amount


class RecipeIn(BaseModel):
    type: Literal["recipe"]
    name: str = Field(..., min_length=1)
    requiredItems: List[RequiredItemIn] = Field(default_factory=list)


EntryIn = Annotated[Union[IngredientIn, RecipeIn], Field(discriminator="type")]


class IngredientQuantity(BaseModel):
    name: str
    quantity: Union[int, float]


class RecipeSummaryResponse(BaseModel):
    name: str
    type: Literal["recipe"] = "recipe"
    cookTime: Union[int, float]
    ingredients: List[IngredientQuantity]
