from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime, timezone
from app.schemas.base import CamelModel, Money, MoneyIn

class LotBase(CamelModel):
    customer_code: str = Field(min_length=1)
    price: Optional[MoneyIn] = None
    currency_code: Optional[str] = None
    nds_rate: Optional[str] = None
    place_delivery: Optional[str] = None
    # Колонка без часового пояса: время со смещением приводится к UTC
    date_delivery: Optional[datetime] = None

    @field_validator("date_delivery")
    @classmethod
    def naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

class LotCreate(LotBase):
    lot_name: str = Field(min_length=1)

class LotUpdate(LotBase):
    # Ключ берётся из пути, значение в теле игнорируется
    lot_name: Optional[str] = None

class Lot(LotBase):
    lot_name: str
    customer_code: str
    price: Optional[Money] = None
