from typing import Iterable


class PurchaseError(Exception):
    """Базовая ошибка слоя доступа к данным."""


class NotFoundError(PurchaseError):
    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} '{key}' not found")


class ConstraintViolationError(PurchaseError):
    """Хранилище отклонило insert/update (уникальность, типы, длины)."""

    def __init__(self, entity: str, key: str, reason: str):
        self.entity = entity
        self.key = key
        self.reason = reason
        super().__init__(f"{entity} '{key}' rejected by the store: {reason}")


class InvalidSortError(PurchaseError):
    def __init__(self, prop: str, allowed: Iterable[str]):
        self.property = prop
        self.allowed = sorted(allowed)
        super().__init__(
            f"Invalid sort field '{prop}', expected one of: {', '.join(self.allowed)}"
        )
