"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a product.

    Every field is optional at the schema level: required-field checks
    happen in ``ProductService`` so the error message lists all of them.
    """

    name: str | None = Field(None, examples=["Mug"])
    price: float | None = Field(None, examples=[9.99])
    category: str | None = Field(None, examples=["Home"])
    stock: int | None = Field(None, examples=[12])
    description: str | None = None


class ProductUpdate(BaseModel):
    """Schema for updating an existing product — all fields optional."""

    name: str | None = None
    price: float | None = None
    category: str | None = None
    stock: int | None = None
    description: str | None = None


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    price: float
    category: str
    stock: int
    description: str

    model_config = {"from_attributes": True}
