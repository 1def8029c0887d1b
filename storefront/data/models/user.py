from sqlalchemy import Column, String
from storefront.data.database import Base
from storefront.utils.providers import new_id


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
