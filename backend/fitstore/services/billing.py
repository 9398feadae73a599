"""
Billing calculator.

Prices a list of cart lines against the catalog. Money is handled as
Decimal and rounded half-up to cents at each step:

    lineTotal = round(price * qty)
    subtotal  = sum(lineTotal)
    shipping  = 0 if subtotal > 100 else 5
    tax       = round(subtotal * 0.12)
    total     = round(subtotal + shipping + tax)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Sequence

from fitstore.core.errors import ValidationError
from fitstore.core.security import Claims
from fitstore.models.activity import ActivityType
from fitstore.models.product import Product
from fitstore.services import activity_log

CENT = Decimal("0.01")
FREE_SHIPPING_OVER = Decimal("100")
FLAT_SHIPPING = Decimal("5")
TAX_RATE = Decimal("0.12")


def money(value: Any) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CartLine:
    id: str
    qty: int


@dataclass
class Bill:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal
    details: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "subtotal": float(self.subtotal),
            "shipping": float(self.shipping),
            "tax": float(self.tax),
            "total": float(self.total),
            "details": self.details,
        }


def compute_bill(lines: Sequence[CartLine], catalog: Mapping[str, Any]) -> Bill:
    """
    Price `lines` against `catalog` (product id -> object with id, name,
    company and price attributes).

    Raises:
        ValidationError: Empty cart, non-positive quantity, or a line
            referencing a product that is not in the catalog. Nothing is
            priced in that case.
    """
    if not lines:
        raise ValidationError("Cart is empty")
    missing = sorted({line.id for line in lines if line.id not in catalog})
    if missing:
        raise ValidationError(f"Unknown product id(s): {', '.join(missing)}")

    subtotal = Decimal("0")
    details = []
    for line in lines:
        if line.qty < 1:
            raise ValidationError(f"Quantity for {line.id} must be a positive integer")
        product = catalog[line.id]
        price = money(product.price)
        line_total = money(price * line.qty)
        subtotal += line_total
        details.append({
            "id": product.id,
            "name": product.name,
            "company": product.company,
            "price": float(price),
            "qty": line.qty,
            "lineTotal": float(line_total),
        })

    subtotal = money(subtotal)
    shipping = Decimal("0") if subtotal > FREE_SHIPPING_OVER else FLAT_SHIPPING
    tax = money(subtotal * TAX_RATE)
    total = money(subtotal + shipping + tax)
    return Bill(subtotal=subtotal, shipping=shipping, tax=tax, total=total, details=details)


async def load_catalog(ids: Sequence[str]) -> dict[str, Product]:
    rows = await Product.filter(id__in=list(set(ids)))
    return {p.id: p for p in rows}


async def list_products() -> list[dict]:
    rows = await Product.all().order_by("id")
    return [p.to_dict() for p in rows]


async def bill_cart(claims: Claims, lines: Sequence[CartLine]) -> Bill:
    """Price the caller's cart and log a `checkout` summary under their email."""
    catalog = await load_catalog([line.id for line in lines])
    bill = compute_bill(lines, catalog)
    await activity_log.record(ActivityType.CHECKOUT, claims.email, {
        "subtotal": float(bill.subtotal),
        "shipping": float(bill.shipping),
        "tax": float(bill.tax),
        "total": float(bill.total),
        "itemsCount": len(lines),
    })
    return bill
