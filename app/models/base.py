from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

from app.core.config import settings

Base = declarative_base(metadata=MetaData(schema=settings.DB_SCHEMA))
