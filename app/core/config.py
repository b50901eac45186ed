from os import getenv
from dotenv import load_dotenv

load_dotenv()


def _getbool(name: str, default: str = "false") -> bool:
    return getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:

    ALLOWED_ORIGINS: list = getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")


    POSTGRES_USER: str = getenv("POSTGRES_USER")
    POSTGRES_PASSWORD: str = getenv("POSTGRES_PASSWORD")
    POSTGRES_DB: str = getenv("POSTGRES_DB")
    POSTGRES_HOST: str = getenv("POSTGRES_HOST", "db")
    POSTGRES_PORT: str = getenv("POSTGRES_PORT", "5432")

    # Схема с таблицами customer и lot (в проде - purchase)
    DB_SCHEMA: str | None = getenv("DB_SCHEMA") or None
    DB_ECHO: bool = _getbool("DB_ECHO")

    @property
    def DATABASE_URL(self) -> str:
        return getenv(
            "DATABASE_URL",
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # Пагинация
    DEFAULT_PAGE_SIZE: int = int(getenv("DEFAULT_PAGE_SIZE", "20"))
    MAX_PAGE_SIZE: int = int(getenv("MAX_PAGE_SIZE", "2000"))

    # Логирование
    LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = getenv("LOG_FILE", "app.log")

    # Порт приложения
    APP_PORT: int = int(getenv("APP_PORT", "8000"))

    def validate(self) -> None:
        """Проверяет наличие обязательных переменных окружения."""
        if self.DEFAULT_PAGE_SIZE < 1 or self.DEFAULT_PAGE_SIZE > self.MAX_PAGE_SIZE:
            raise ValueError("DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE")
        if getenv("DATABASE_URL"):
            return
        required_vars = {
            "POSTGRES_USER": self.POSTGRES_USER,
            "POSTGRES_PASSWORD": self.POSTGRES_PASSWORD,
            "POSTGRES_DB": self.POSTGRES_DB,
        }
        missing_vars = [key for key, value in required_vars.items() if not value]
        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

settings = Config()
settings.validate()
