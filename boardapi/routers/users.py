from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from boardapi.database import get_db
from boardapi.exceptions import DuplicateError
from boardapi.schemas import UserCreate, UserResponse
from boardapi.services import user_service

router = APIRouter(prefix="/api/v1/users", tags=["users"])

@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    users = await user_service.get_users(db)
    return [UserResponse.model_validate(u) for u in users]

@router.get("/{username}", response_model=UserResponse)
async def get_user(username: str, db: AsyncSession = Depends(get_db)):
    user = await user_service.get_user_by_username(db, username)
    return UserResponse.model_validate(user)

@router.post("", status_code=201, response_model=UserResponse)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    try:
        user = await user_service.create_user(db, data)
    except IntegrityError:
        raise DuplicateError("A user with this username or email already exists") from None
    return UserResponse.model_validate(user)
