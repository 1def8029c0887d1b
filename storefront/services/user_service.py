from sqlalchemy.orm import Session
from storefront.data.models.user import UserModel
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import UserCreate, UserOut
from storefront.repos.user_repo import UserRepo
from storefront.utils.providers import new_id


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserOut:
        existing = self.repo.get_user_by_email(payload.email)
        if existing:
            return UserOut.model_validate(existing)

        user = UserModel(id=new_id(), name=payload.name, email=payload.email)
        created = self.repo.create_user(user)
        return UserOut.model_validate(created)

    def get_user(self, user_id: str) -> UserOut:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found with given id")
        return UserOut.model_validate(user)
