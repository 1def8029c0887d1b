from fastapi import APIRouter, Depends

from storefront.api.deps import get_user_service
from storefront.domain.schemas import UserCreate, UserOut
from storefront.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)):
    return svc.create_user(payload)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, svc: UserService = Depends(get_user_service)):
    return svc.get_user(user_id)
