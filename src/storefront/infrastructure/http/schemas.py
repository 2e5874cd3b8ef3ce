"""Pydantic request schemas for the HTTP API.

These are separate from the application DTOs: the API schemas are the
external contract, the DTOs are what the handlers speak.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CategoryRequest(BaseModel):
    name: str | None = None


class FilterRequest(BaseModel):
    checked: list[str] = Field(default_factory=list)
    radio: list[Any] = Field(default_factory=list)


class ReviewRequest(BaseModel):
    body: str | None = None
    rating: int | str | None = None


class CartProduct(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    price: Any = None


class CartEntry(BaseModel):
    model_config = ConfigDict(extra="allow")

    product: CartProduct


class PaymentRequest(BaseModel):
    nonce: str | None = None
    cart: list[CartEntry] = Field(default_factory=list)
