from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


def to_camel(string: str) -> str:
    """customer_code_main -> customerCodeMain"""
    parts = string.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


# Decimal в JSON уходит числом, как ждёт фронтенд
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
MoneyIn = Annotated[Decimal, Field(ge=0, max_digits=15, decimal_places=2)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
