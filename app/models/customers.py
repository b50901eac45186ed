from sqlalchemy import Boolean, Column, String, false
from app.models.base import Base

class Customer(Base):
    __tablename__ = "customer"

    customer_code = Column(String, primary_key=True)
    customer_name = Column(String, nullable=False)
    customer_inn = Column(String)
    customer_kpp = Column(String)
    customer_legal_address = Column(String)
    customer_postal_address = Column(String)
    customer_email = Column(String)
    # Код головной организации; ссылка только по соглашению, FK не объявлен
    customer_code_main = Column(String)
    is_organization = Column(Boolean, nullable=False, default=False, server_default=false())
    is_person = Column(Boolean, nullable=False, default=False, server_default=false())
