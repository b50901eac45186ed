from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import ConstraintViolationError, NotFoundError
from app.crud.query import combine, contains, equals, fetch_page, order_by
from app.crud.store import commit_or_reject
from app.models.customers import Customer
from app.schemas.customer import CustomerCreate, CustomerUpdate
from app.schemas.filters import CustomerFilter
from app.schemas.page import PageRequest

ENTITY = "Customer"

SORT_FIELDS = {
    "customerCode": Customer.customer_code,
    "customerName": Customer.customer_name,
    "customerInn": Customer.customer_inn,
    "customerKpp": Customer.customer_kpp,
    "isOrganization": Customer.is_organization,
    "isPerson": Customer.is_person,
    "customerLegalAddress": Customer.customer_legal_address,
    "customerPostalAddress": Customer.customer_postal_address,
    "customerEmail": Customer.customer_email,
    "customerCodeMain": Customer.customer_code_main,
}


def customer_condition(filters: CustomerFilter):
    return combine([
        contains(Customer.customer_code, filters.customer_code),
        contains(Customer.customer_name, filters.name),
        equals(Customer.customer_inn, filters.inn),
        equals(Customer.is_organization, filters.is_organization),
        equals(Customer.is_person, filters.is_person),
        equals(Customer.customer_kpp, filters.kpp),
        contains(Customer.customer_legal_address, filters.legal_address),
        contains(Customer.customer_postal_address, filters.postal_address),
        contains(Customer.customer_email, filters.email),
        contains(Customer.customer_code_main, filters.code_main),
    ])


async def find_customers(
        db: AsyncSession, filters: CustomerFilter, page_request: PageRequest
) -> Tuple[list, int]:
    ordering = order_by(page_request.sort, SORT_FIELDS, Customer.customer_code)
    return await fetch_page(db, select(Customer), customer_condition(filters), ordering, page_request)


async def get_customer(db: AsyncSession, customer_code: str) -> Customer | None:
    return await db.get(Customer, customer_code)


async def create_customer(db: AsyncSession, data: CustomerCreate) -> Customer:
    if await get_customer(db, data.customer_code):
        raise ConstraintViolationError(ENTITY, data.customer_code, "already exists")

    db_customer = Customer(**data.model_dump())
    db.add(db_customer)
    await commit_or_reject(db, ENTITY, data.customer_code)
    await db.refresh(db_customer)
    return db_customer


async def replace_customer(db: AsyncSession, customer_code: str, data: CustomerUpdate) -> Customer:
    """Полная замена записи: все поля, кроме ключа, перезаписываются значениями из тела."""
    db_customer = await get_customer(db, customer_code)
    if not db_customer:
        raise NotFoundError(ENTITY, customer_code)

    for key, value in data.model_dump(exclude={"customer_code"}).items():
        setattr(db_customer, key, value)

    await commit_or_reject(db, ENTITY, customer_code)
    await db.refresh(db_customer)
    return db_customer


async def delete_customer(db: AsyncSession, customer_code: str) -> None:
    db_customer = await get_customer(db, customer_code)
    if not db_customer:
        raise NotFoundError(ENTITY, customer_code)
    await db.delete(db_customer)
    await db.commit()
