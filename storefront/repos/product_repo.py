from sqlalchemy import select
from sqlalchemy.orm import Session
from storefront.data.models.category import CategoryModel
from storefront.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def has_products(self) -> bool:
        return self.db.execute(select(ProductModel.id).limit(1)).first() is not None

    def create_category(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.flush()
        return category

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
