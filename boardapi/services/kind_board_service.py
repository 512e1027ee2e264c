"""
Kind board service: named board categories.

Categories are created explicitly and only ever referenced by boards;
board creation never creates one as a side effect.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from boardapi.cache import KIND_BOARD_LIST_KEY, cache
from boardapi.config import settings
from boardapi.exceptions import DuplicateError, InvalidArgumentError, KindBoardNotFoundError
from boardapi.models import KindBoard

logger = logging.getLogger(__name__)


def _kind_board_to_dict(kind_board: KindBoard) -> dict:
    return {
        "id": kind_board.id,
        "kind_board_name": kind_board.kind_board_name,
        "created_at": kind_board.created_at.isoformat() if kind_board.created_at else None,
    }


async def _find_by_name(db: AsyncSession, name: str) -> KindBoard | None:
    result = await db.execute(select(KindBoard).where(KindBoard.kind_board_name == name))
    return result.scalar_one_or_none()


async def create_kind_board(db: AsyncSession, name: str) -> KindBoard:
    if not name:
        raise InvalidArgumentError("Kind board name must not be empty")
    if await _find_by_name(db, name) is not None:
        raise DuplicateError(f"Kind board already exists: {name}")

    kind_board = KindBoard(kind_board_name=name)
    db.add(kind_board)
    await db.flush()
    await cache.invalidate_kind_boards()
    logger.info("Created kind board %r (id=%d)", name, kind_board.id)
    return kind_board


async def get_kind_board(db: AsyncSession, kind_board_id: int) -> KindBoard:
    """
    Return the category with *kind_board_id*.

    Ids start at 1, so 0 (or any falsy id) is rejected without a query.
    """
    kind_board = await db.get(KindBoard, kind_board_id) if kind_board_id else None
    if kind_board is None:
        raise KindBoardNotFoundError(kind_board_id)
    return kind_board


async def get_kind_board_by_name(db: AsyncSession, name: str) -> KindBoard:
    kind_board = await _find_by_name(db, name) if name else None
    if kind_board is None:
        raise KindBoardNotFoundError(name)
    return kind_board


async def get_kind_boards(db: AsyncSession) -> list[dict]:
    """Return every category ordered by name, cached until the next create."""
    cached = await cache.get(KIND_BOARD_LIST_KEY)
    if cached is not None:
        return cached

    result = await db.execute(select(KindBoard).order_by(KindBoard.kind_board_name))
    items = [_kind_board_to_dict(k) for k in result.scalars().all()]
    await cache.set(KIND_BOARD_LIST_KEY, items, ttl=settings.CACHE_TTL_LIST)
    return items
