from datetime import datetime
from enum import Enum

from pydantic import ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from marketmate.schemas.common import CamelModel, Int32, Money


class StockStatus(str, Enum):
    ALL = "all"
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


class ProductBase(CamelModel):
    name: str = Field(min_length=1)
    description: str | None = None
    category: str = Field(min_length=1)
    price: Money
    stock: Int32 = Field(default=0, ge=0)
    low_stock_threshold: Int32 = Field(default=10, ge=0)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(CamelModel):
    """Partial update: only fields present in the request body are applied."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    category: str | None = Field(default=None, min_length=1)
    price: Money | None = None
    stock: Int32 | None = Field(default=None, ge=0)
    low_stock_threshold: Int32 | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for field in ("name", "category", "price", "stock", "low_stock_threshold"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ProductRead(ProductBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime
