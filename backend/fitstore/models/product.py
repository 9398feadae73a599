# fitstore/models/product.py
from tortoise import fields, models


class Product(models.Model):
    """
    Catalog entry. Read-only to the API; rows come from the startup seed.
    """
    id = fields.CharField(max_length=32, pk=True)  # Short stable id referenced by cart lines (e.g. "p1")
    name = fields.CharField(max_length=128)
    company = fields.CharField(max_length=128)
    type = fields.CharField(max_length=16)  # "equipment" | "supplement"
    price = fields.DecimalField(max_digits=10, decimal_places=2)
    weight = fields.CharField(max_length=32, null=True)  # Display string, e.g. "2 kg"
    img = fields.CharField(max_length=256, null=True)  # Asset file name resolved by the storefront

    class Meta:
        table = "products"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "company": self.company,
            "type": self.type,
            "price": float(self.price),
            "weight": self.weight,
            "img": self.img,
        }
