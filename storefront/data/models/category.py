from sqlalchemy import Column, String, Text
from storefront.data.database import Base
from storefront.utils.providers import new_id


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
