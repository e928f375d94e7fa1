from datetime import datetime

from pydantic import ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from marketmate.schemas.common import CENT, CamelModel, Int32, Money
from marketmate.schemas.product import ProductRead


class SaleCreate(CamelModel):
    product_id: str = Field(min_length=1)
    quantity: Int32 = Field(gt=0)
    unit_price: Money
    total_amount: Money
    payment_method: str = Field(min_length=1)
    notes: str | None = None

    @model_validator(mode="after")
    def check_total_amount(self):
        expected = (self.unit_price * self.quantity).quantize(CENT)
        if self.total_amount.quantize(CENT) != expected:
            raise ValueError(
                f"totalAmount {self.total_amount} does not equal quantity x unitPrice ({expected})"
            )
        return self


class SaleRead(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    product_id: str
    quantity: int
    unit_price: Money
    total_amount: Money
    payment_method: str
    notes: str | None = None
    created_at: datetime


class SaleWithProduct(SaleRead):
    product: ProductRead
