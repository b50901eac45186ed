from pydantic import Field
from typing import Optional
from app.schemas.base import CamelModel

class CustomerBase(CamelModel):
    customer_name: str = Field(min_length=1)
    customer_inn: Optional[str] = None
    customer_kpp: Optional[str] = None
    customer_legal_address: Optional[str] = None
    customer_postal_address: Optional[str] = None
    customer_email: Optional[str] = None
    customer_code_main: Optional[str] = None
    is_organization: bool = False
    is_person: bool = False

class CustomerCreate(CustomerBase):
    customer_code: str = Field(min_length=1)

class CustomerUpdate(CustomerBase):
    # Ключ берётся из пути, значение в теле игнорируется
    customer_code: Optional[str] = None

class Customer(CustomerBase):
    customer_code: str
    customer_name: str
