from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import ConstraintViolationError, NotFoundError
from app.crud.query import at_least, at_most, combine, contains, equals, fetch_page, order_by
from app.crud.store import commit_or_reject
from app.models.lots import Lot as LotModel
from app.schemas.filters import LotFilter
from app.schemas.lot import LotCreate, LotUpdate
from app.schemas.page import PageRequest

ENTITY = "Lot"

SORT_FIELDS = {
    "lotName": LotModel.lot_name,
    "customerCode": LotModel.customer_code,
    "price": LotModel.price,
    "currencyCode": LotModel.currency_code,
    "ndsRate": LotModel.nds_rate,
    "placeDelivery": LotModel.place_delivery,
    "dateDelivery": LotModel.date_delivery,
}


def lot_condition(filters: LotFilter):
    return combine([
        contains(LotModel.lot_name, filters.lot_name),
        equals(LotModel.customer_code, filters.customer_code),
        at_least(LotModel.price, filters.min_price),
        at_most(LotModel.price, filters.max_price),
        equals(LotModel.currency_code, filters.currency_code),
        equals(LotModel.nds_rate, filters.nds_rate),
        contains(LotModel.place_delivery, filters.place_delivery),
    ])


async def find_lots(db: AsyncSession, filters: LotFilter, page_request: PageRequest) -> Tuple[list, int]:
    ordering = order_by(page_request.sort, SORT_FIELDS, LotModel.lot_name)
    return await fetch_page(db, select(LotModel), lot_condition(filters), ordering, page_request)


async def get_lot(db: AsyncSession, lot_name: str) -> LotModel | None:
    return await db.get(LotModel, lot_name)


async def create_lot(db: AsyncSession, data: LotCreate) -> LotModel:
    if await get_lot(db, data.lot_name):
        raise ConstraintViolationError(ENTITY, data.lot_name, "already exists")

    db_lot = LotModel(**data.model_dump())
    db.add(db_lot)
    await commit_or_reject(db, ENTITY, data.lot_name)
    await db.refresh(db_lot)
    return db_lot


async def replace_lot(db: AsyncSession, lot_name: str, data: LotUpdate) -> LotModel:
    db_lot = await get_lot(db, lot_name)
    if not db_lot:
        raise NotFoundError(ENTITY, lot_name)

    for key, value in data.model_dump(exclude={"lot_name"}).items():
        setattr(db_lot, key, value)

    await commit_or_reject(db, ENTITY, lot_name)
    await db.refresh(db_lot)
    return db_lot


async def delete_lot(db: AsyncSession, lot_name: str) -> None:
    db_lot = await get_lot(db, lot_name)
    if not db_lot:
        raise NotFoundError(ENTITY, lot_name)
    await db.delete(db_lot)
    await db.commit()
