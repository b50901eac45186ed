import math
from typing import List, NamedTuple, Sequence

from pydantic import BaseModel, Field

from app.core.config import settings
from app.schemas.base import CamelModel
from app.schemas.customer import Customer
from app.schemas.lot import Lot


class SortOrder(NamedTuple):
    name: str
    ascending: bool = True

    @property
    def direction(self) -> str:
        return "asc" if self.ascending else "desc"


class PageRequest(BaseModel):
    """Номер страницы с нуля, размер и уже разобранные ключи сортировки."""

    page: int = Field(0, ge=0)
    size: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1)
    sort: List[SortOrder] = []

    @property
    def offset(self) -> int:
        return self.page * self.size


class SortInfo(CamelModel):
    property: str
    direction: str


class PageBase(CamelModel):
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
    sort: List[SortInfo] = []


class CustomerPage(PageBase):
    content: List[Customer]


class LotPage(PageBase):
    content: List[Lot]


def build_page(content: Sequence, total: int, page_request: PageRequest) -> dict:
    total_pages = math.ceil(total / page_request.size)
    return {
        "content": list(content),
        "total_elements": total,
        "total_pages": total_pages,
        "number": page_request.page,
        "size": page_request.size,
        "number_of_elements": len(content),
        "first": page_request.page == 0,
        "last": page_request.page + 1 >= total_pages,
        "empty": len(content) == 0,
        "sort": [{"property": o.name, "direction": o.direction} for o in page_request.sort],
    }
