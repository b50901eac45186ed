import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.api import routes
from app.core.config import settings
from app.core.logging_config import logger

app = FastAPI(title="Purchase registry API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(routes.router)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    # Сессия уже откатена в get_db
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error: database failure"})


if __name__ == "__main__":
    logger.info(f"Starting on port {settings.APP_PORT}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.APP_PORT)
