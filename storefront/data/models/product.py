from sqlalchemy import Column, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship
from storefront.data.database import Base
from storefront.utils.providers import new_id


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    #cena po rabacie, z niej liczymy total w koszyku i zamowieniu
    discounted_price = Column(Numeric(12, 2), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)

    category = relationship("CategoryModel")
