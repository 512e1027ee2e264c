"""
User service: creation and lookup for the User aggregate.

Users are fetched without caching; the board service resolves acting
usernames through ``get_user_by_username`` on every write.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from boardapi.exceptions import DuplicateError, UserNotFoundError
from boardapi.models import User
from boardapi.schemas import UserCreate

logger = logging.getLogger(__name__)


async def get_users(db: AsyncSession) -> list[User]:
    """Return all users, newest first."""
    result = await db.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
    return list(result.scalars().all())


async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


async def find_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> User:
    """Return the user named *username* or raise ``UserNotFoundError``."""
    user = await find_user_by_username(db, username) if username else None
    if user is None:
        raise UserNotFoundError(username)
    return user


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    """
    Create and return a new user.

    Username uniqueness is checked here so the caller gets a
    ``DuplicateError``; email uniqueness is left to the database constraint
    and surfaces as ``IntegrityError`` at flush time.
    """
    if await find_user_by_username(db, data.username) is not None:
        raise DuplicateError(f"Username already exists: {data.username}")

    user = User(
        username=data.username,
        email=data.email,
        nickname=data.nickname,
        authority=data.authority,
    )
    db.add(user)
    await db.flush()
    logger.info("Created user %s (id=%d, authority=%s)", user.username, user.id, user.authority.value)
    return user
