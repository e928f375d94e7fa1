from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CENT = Decimal("0.01")

# NUMERIC(10, 2) on the way in; serialized back out as a decimal string
Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class CamelModel(BaseModel):
    """JSON bodies use camelCase; snake_case names are accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Stock and quantity columns are 32-bit INTEGER
INT32_MAX = 2**31 - 1
Int32 = Annotated[int, Field(le=INT32_MAX)]
