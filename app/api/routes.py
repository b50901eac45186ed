from fastapi import APIRouter
from app.api.endpoints import customers, health, lots

router = APIRouter(prefix="/api")

router.include_router(customers.router, prefix="/customers", tags=["Customers"])
router.include_router(lots.router, prefix="/lots", tags=["Lots"])
router.include_router(health.router, prefix="/health", tags=["Health"])
