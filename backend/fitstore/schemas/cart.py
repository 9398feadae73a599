# fitstore/schemas/cart.py
"""
Pydantic schemas for the product catalog and cart billing.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

__all__ = ["ProductOut", "CartLineIn", "BillRequest", "BillLineOut", "BillOut"]


class ProductOut(BaseModel):
    id: str
    name: str
    company: str
    type: Literal["equipment", "supplement"]
    price: float
    weight: Optional[str] = None
    img: Optional[str] = None


class CartLineIn(BaseModel):
    id: str = Field(min_length=1)  # Product id
    qty: int = Field(ge=1)


class BillRequest(BaseModel):
    items: List[CartLineIn] = Field(min_length=1)


class BillLineOut(BaseModel):
    id: str
    name: str
    company: str
    price: float
    qty: int
    lineTotal: float


class BillOut(BaseModel):
    subtotal: float
    shipping: float
    tax: float
    total: float
    details: List[BillLineOut]
