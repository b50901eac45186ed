from sqlalchemy import Column, DateTime, Numeric, String
from app.models.base import Base

class Lot(Base):
    __tablename__ = "lot"

    lot_name = Column(String, primary_key=True)
    customer_code = Column(String, nullable=False)
    price = Column(Numeric(15, 2))
    currency_code = Column(String)
    nds_rate = Column(String)
    place_delivery = Column(String)
    date_delivery = Column(DateTime)
