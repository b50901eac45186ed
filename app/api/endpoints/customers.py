from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ConstraintViolationError, InvalidSortError, NotFoundError
from app.core.logging_config import logger
from app.crud import customers as crud
from app.crud.query import parse_sort
from app.db.database import get_db
from app.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from app.schemas.filters import CustomerFilter
from app.schemas.page import CustomerPage, PageRequest, build_page

router = APIRouter()


@router.get(
    "",
    response_model=CustomerPage,
    summary="Список заказчиков",
    description="Фильтры необязательны и объединяются через AND. Строковые фильтры ищут подстроку без учёта регистра, "
                "ИНН, КПП и флаги сравниваются точно. Сортировка: sort=поле[,asc|desc], параметр можно повторять.",
    responses={400: {"description": "Неизвестное поле сортировки",
                     "content": {"application/json": {"example": {"detail": "Invalid sort field 'foo', expected one of: ..."}}}}}
)
async def get_customers(
        customer_code: Optional[str] = Query(None, alias="customerCode", description="Код заказчика (подстрока)"),
        name: Optional[str] = Query(None, description="Наименование (подстрока)"),
        inn: Optional[str] = Query(None, description="ИНН (точное совпадение)"),
        is_organization: Optional[bool] = Query(None, alias="isOrganization"),
        is_person: Optional[bool] = Query(None, alias="isPerson"),
        customer_kpp: Optional[str] = Query(None, alias="customerKpp", description="КПП (точное совпадение)"),
        customer_legal_address: Optional[str] = Query(None, alias="customerLegalAddress"),
        customer_postal_address: Optional[str] = Query(None, alias="customerPostalAddress"),
        customer_email: Optional[str] = Query(None, alias="customerEmail"),
        customer_code_main: Optional[str] = Query(None, alias="customerCodeMain"),
        page: int = Query(0, ge=0, description="Номер страницы, с нуля"),
        size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы"),
        sort: List[str] = Query([], description="Поле сортировки, например customerName,desc"),
        db: AsyncSession = Depends(get_db)
):
    filters = CustomerFilter(
        customer_code=customer_code,
        name=name,
        inn=inn,
        kpp=customer_kpp,
        is_organization=is_organization,
        is_person=is_person,
        legal_address=customer_legal_address,
        postal_address=customer_postal_address,
        email=customer_email,
        code_main=customer_code_main,
    )
    page_request = PageRequest(page=page, size=size, sort=parse_sort(sort))
    logger.info(f"Fetching customers: page={page}, size={size}, filters={filters.model_dump(exclude_none=True)}, sort={sort}")

    try:
        customers, total = await crud.find_customers(db, filters, page_request)
    except InvalidSortError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Returning {len(customers)} customers, total={total}")
    return build_page(customers, total, page_request)


@router.get("/{customer_code}", response_model=Customer, summary="Заказчик по коду")
async def get_customer(customer_code: str, db: AsyncSession = Depends(get_db)):
    customer = await crud.get_customer(db, customer_code)
    if not customer:
        logger.warning(f"Customer {customer_code} not found")
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("", response_model=Customer, status_code=201, summary="Создание заказчика")
async def create_customer(customer: CustomerCreate, db: AsyncSession = Depends(get_db)):
    logger.info(f"Creating customer {customer.customer_code}")
    try:
        return await crud.create_customer(db, customer)
    except ConstraintViolationError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{customer_code}", response_model=Customer, summary="Полная замена заказчика")
async def update_customer(customer_code: str, customer: CustomerUpdate, db: AsyncSession = Depends(get_db)):
    logger.info(f"Replacing customer {customer_code}")
    try:
        return await crud.replace_customer(db, customer_code, customer)
    except NotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail="Customer not found")
    except ConstraintViolationError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{customer_code}", status_code=204, response_class=Response, summary="Удаление заказчика")
async def delete_customer(customer_code: str, db: AsyncSession = Depends(get_db)):
    logger.info(f"Deleting customer {customer_code}")
    try:
        await crud.delete_customer(db, customer_code)
    except NotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail="Customer not found")
    return Response(status_code=204)
