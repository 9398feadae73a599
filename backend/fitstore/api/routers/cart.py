# fitstore/api/routers/cart.py
from typing import List

from fastapi import APIRouter, Depends

from fitstore.api.deps import get_claims
from fitstore.core.security import Claims
from fitstore.schemas.cart import BillOut, BillRequest, ProductOut
from fitstore.services.billing import CartLine, bill_cart, list_products

router = APIRouter(tags=["cart"])


@router.get("/products", response_model=List[ProductOut])
async def products():
    """Public product catalog."""
    return await list_products()


@router.post("/cart/bill", response_model=BillOut)
async def bill(body: BillRequest, claims: Claims = Depends(get_claims)):
    """
    Price a cart and record a `checkout` activity for the caller.

    Errors:
        - 400 VALIDATION_ERROR: empty cart, qty < 1, or an unknown product id
          (the whole request is rejected)
        - 401 AUTH_ERROR: missing or invalid token
    """
    lines = [CartLine(id=item.id, qty=item.qty) for item in body.items]
    result = await bill_cart(claims, lines)
    return result.to_dict()
