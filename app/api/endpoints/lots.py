from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ConstraintViolationError, InvalidSortError, NotFoundError
from app.core.logging_config import logger
from app.crud import lots as crud
from app.crud.query import parse_sort
from app.db.database import get_db
from app.schemas.filters import LotFilter
from app.schemas.lot import Lot, LotCreate, LotUpdate
from app.schemas.page import LotPage, PageRequest, build_page

router = APIRouter()


@router.get("", response_model=LotPage, summary="Список лотов")
async def get_lots(
        lot_name: Optional[str] = Query(None, alias="lotName", description="Наименование лота (подстрока)"),
        customer_code: Optional[str] = Query(None, alias="customerCode", description="Код заказчика"),
        min_price: Optional[Decimal] = Query(None, alias="minPrice", description="Цена от (включительно)"),
        max_price: Optional[Decimal] = Query(None, alias="maxPrice", description="Цена до (включительно)"),
        currency_code: Optional[str] = Query(None, alias="currencyCode"),
        nds_rate: Optional[str] = Query(None, alias="ndsRate"),
        place_delivery: Optional[str] = Query(None, alias="placeDelivery", description="Место поставки (подстрока)"),
        page: int = Query(0, ge=0, description="Номер страницы, с нуля"),
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы"),
        sort: List[str] = Query([], description="Поле сортировки, например price,desc"),
        db: AsyncSession = Depends(get_db)
):
    filters = LotFilter(
        lot_name=lot_name,
        customer_code=customer_code,
        min_price=min_price,
        max_price=max_price,
        currency_code=currency_code,
        nds_rate=nds_rate,
        place_delivery=place_delivery,
    )
    page_request = PageRequest(page=page, size=size, sort=parse_sort(sort))
    logger.info(f"Fetching lots: page={page}, size={size}, filters={filters.model_dump(exclude_none=True)}, sort={sort}")

    try:
        lots, total = await crud.find_lots(db, filters, page_request)
    except InvalidSortError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Returning {len(lots)} lots, total={total}")
    return build_page(lots, total, page_request)


@router.get("/{lot_name:path}", response_model=Lot, summary="Лот по наименованию")
async def get_lot(lot_name: str, db: AsyncSession = Depends(get_db)):
    lot = await crud.get_lot(db, lot_name)
    if not lot:
        logger.warning(f"Lot {lot_name} not found")
        raise HTTPException(status_code=404, detail="Lot not found")
    return lot


@router.post("", response_model=Lot, status_code=201, summary="Создание лота")
async def create_lot(lot: LotCreate, db: AsyncSession = Depends(get_db)):
    logger.info(f"Creating lot {lot.lot_name}")
    try:
        return await crud.create_lot(db, lot)
    except ConstraintViolationError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{lot_name:path}", response_model=Lot, summary="Полная замена лота")
async def update_lot(lot_name: str, lot: LotUpdate, db: AsyncSession = Depends(get_db)):
    logger.info(f"Replacing lot {lot_name}")
    try:
        return await crud.replace_lot(db, lot_name, lot)
    except NotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail="Lot not found")
    except ConstraintViolationError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{lot_name:path}", status_code=204, response_class=Response, summary="Удаление лота")
async def delete_lot(lot_name: str, db: AsyncSession = Depends(get_db)):
    logger.info(f"Deleting lot {lot_name}")
    try:
        await crud.delete_lot(db, lot_name)
    except NotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail="Lot not found")
    return Response(status_code=204)
