"""Построение динамических WHERE / ORDER BY для списочных запросов.

Каждый фильтр превращается в предикат или в None (фильтр не задан),
заданные предикаты склеиваются через AND. Ключи сортировки проходят
через белый список {внешнее имя -> колонка}.
"""
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import ColumnElement, Select, and_, asc, desc, func, true
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import InvalidSortError
from app.schemas.page import PageRequest, SortOrder

LIKE_ESCAPE = "\\"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains(column, value: Optional[str]) -> Optional[ColumnElement]:
    """Подстрока без учёта регистра."""
    if _is_blank(value):
        return None
    return column.ilike(f"%{escape_like(value)}%", escape=LIKE_ESCAPE)


def equals(column, value: Any) -> Optional[ColumnElement]:
    if _is_blank(value):
        return None
    return column == value


def at_least(column, value: Any) -> Optional[ColumnElement]:
    if value is None:
        return None
    return column >= value


def at_most(column, value: Any) -> Optional[ColumnElement]:
    if value is None:
        return None
    return column <= value


def combine(predicates: Iterable[Optional[ColumnElement]]) -> ColumnElement:
    active = [p for p in predicates if p is not None]
    if not active:
        return true()
    return and_(*active)


def parse_sort(values: Optional[Sequence[str]]) -> List[SortOrder]:
    """Разбирает параметры sort в формате Spring: "prop[,prop...][,asc|desc]"."""
    orders: List[SortOrder] = []
    for value in values or []:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            continue
        ascending = True
        if len(parts) > 1 and parts[-1].lower() in ("asc", "desc"):
            ascending = parts.pop().lower() == "asc"
        orders.extend(SortOrder(name, ascending) for name in parts)
    return orders


def order_by(orders: Sequence[SortOrder], allowed: Mapping[str, Any], tiebreaker) -> list:
    """Колонки ORDER BY; первичный ключ добавляется последним, чтобы страницы не пересекались."""
    clauses = []
    used = set()
    for order in orders:
        column = allowed.get(order.name)
        if column is None:
            raise InvalidSortError(order.name, allowed.keys())
        clauses.append(asc(column) if order.ascending else desc(column))
        used.add(column.key)
    if tiebreaker.key not in used:
        clauses.append(asc(tiebreaker))
    return clauses


async def fetch_page(
        db: AsyncSession,
        query: Select,
        condition: ColumnElement,
        ordering: list,
        page_request: PageRequest,
) -> Tuple[list, int]:
    query = query.where(condition)

    total_query = select(func.count()).select_from(query.subquery())
    total_result = await db.execute(total_query)
    total = total_result.scalar()

    query = query.order_by(*ordering).offset(page_request.offset).limit(page_request.size)
    result = await db.execute(query)
    return result.scalars().all(), total
