from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConstraintViolationError
from app.core.logging_config import logger


async def commit_or_reject(db: AsyncSession, entity: str, key: str) -> None:
    """Коммит insert/update; отказ хранилища превращается в ConstraintViolationError.

    asyncpg отдаёт ошибки данных не только как DataError (например, InterfaceError
    при кодировании значения), поэтому ловится весь DBAPIError, кроме потери соединения.
    """
    try:
        await db.commit()
    except OperationalError:
        await db.rollback()
        raise
    except DBAPIError as e:
        await db.rollback()
        logger.warning(f"{entity} {key} rejected: {e.orig}")
        raise ConstraintViolationError(entity, key, str(e.orig)) from e
