from decimal import Decimal
from typing import Optional
from pydantic import BaseModel


class CustomerFilter(BaseModel):
    """Необязательные фильтры списка заказчиков; None или пустая строка - без ограничения."""

    customer_code: Optional[str] = None
    name: Optional[str] = None
    inn: Optional[str] = None
    kpp: Optional[str] = None
    is_organization: Optional[bool] = None
    is_person: Optional[bool] = None
    legal_address: Optional[str] = None
    postal_address: Optional[str] = None
    email: Optional[str] = None
    code_main: Optional[str] = None


class LotFilter(BaseModel):
    lot_name: Optional[str] = None
    customer_code: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    currency_code: Optional[str] = None
    nds_rate: Optional[str] = None
    place_delivery: Optional[str] = None
