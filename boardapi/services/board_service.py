"""
Board service: business logic for board posts.

Design notes
------------
- A board references its owner and category by id.  Those ids are resolved
  with explicit lookups (``db.get`` / joins) rather than ORM relationships.
- ``get_board`` bumps ``read_count`` on every successful read, so single
  board reads are never cached.  Listings go through the cache-aside
  layer and are invalidated on every board write.
- Updates come in two flavours keyed by HTTP method.  ``PATCH`` merges
  whichever of title/content are supplied and non-null; ``PUT`` replaces
  both and refuses a payload where either is null.
- Delete is allowed for the owner only.  A mismatch is an expected outcome
  reported as ``False``; authority level plays no part in it.
- Service functions flush but do not commit; the transaction boundary is
  owned by the ``get_db`` dependency in the router layer.
"""
import enum
import logging
import math
from datetime import datetime, timezone

from pydantic import BaseModel
from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from boardapi.cache import cache
from boardapi.config import settings
from boardapi.exceptions import BoardNotFoundError, InvalidArgumentError
from boardapi.models import Board, KindBoard, User
from boardapi.schemas import BoardResponse, PaginatedResponse
from boardapi.services import kind_board_service, user_service

logger = logging.getLogger(__name__)


class UpdateMethod(str, enum.Enum):
    PUT = "PUT"
    PATCH = "PATCH"


# Fields a client may overwrite through PUT/PATCH.
_REPLACEABLE_FIELDS: tuple[str, ...] = ("title", "content")

# Columns that are safe to sort by; guards against arbitrary attribute access.
_SORTABLE_COLUMNS: frozenset[str] = frozenset({"created_at", "read_count", "title", "id"})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve_sort_column(sort_by: str):
    if sort_by in _SORTABLE_COLUMNS:
        return getattr(Board, sort_by)
    return Board.created_at


def _resolve_method(method: str | UpdateMethod) -> UpdateMethod:
    if isinstance(method, UpdateMethod):
        return method
    try:
        return UpdateMethod(str(method).upper())
    except ValueError:
        raise InvalidArgumentError(f"Unsupported update method: {method!r}") from None


async def _load_board(db: AsyncSession, board_id: int) -> Board:
    board = await db.get(Board, board_id)
    if board is None:
        raise BoardNotFoundError(board_id)
    return board


def _merge_fields(board: Board, data: BaseModel) -> None:
    """PATCH: copy only the fields that were supplied with a non-null value."""
    supplied = data.model_dump(
        include=set(_REPLACEABLE_FIELDS), exclude_unset=True, exclude_none=True
    )
    for field, value in supplied.items():
        setattr(board, field, value)


def _check_full_replace(data: BaseModel) -> None:
    missing = [field for field in _REPLACEABLE_FIELDS if getattr(data, field, None) is None]
    if missing:
        raise InvalidArgumentError(
            f"Full update requires non-null values for: {', '.join(missing)}"
        )


def _replace_fields(board: Board, data: BaseModel) -> None:
    """PUT: overwrite every replaceable field; call ``_check_full_replace`` first."""
    for field in _REPLACEABLE_FIELDS:
        setattr(board, field, getattr(data, field))


def _board_row_to_dict(board: Board, username: str | None, kind_board_name: str | None) -> dict:
    """Serialise a Board plus its resolved references (list view)."""
    return {
        "id": board.id,
        "title": board.title,
        "read_count": board.read_count,
        "user_id": board.user_id,
        "username": username,
        "kind_board_id": board.kind_board_id,
        "kind_board_name": kind_board_name,
        "created_at": board.created_at.isoformat() if board.created_at else None,
    }


async def _resolve_references(db: AsyncSession, board: Board) -> tuple[str | None, str | None]:
    owner = await db.get(User, board.user_id)
    kind_board = await db.get(KindBoard, board.kind_board_id) if board.kind_board_id else None
    return (
        owner.username if owner else None,
        kind_board.kind_board_name if kind_board else None,
    )


async def describe_board(db: AsyncSession, board: Board) -> dict:
    """Serialise *board* to its detail dict, resolving owner and category names."""
    username, kind_board_name = await _resolve_references(db, board)
    data = _board_row_to_dict(board, username, kind_board_name)
    data["content"] = board.content
    data["updated_at"] = board.updated_at.isoformat() if board.updated_at else None
    return data


async def to_board_response(db: AsyncSession, board: Board) -> BoardResponse:
    """Map a Board back onto the transfer shape (no counter, no audit fields)."""
    _, kind_board_name = await _resolve_references(db, board)
    return BoardResponse(title=board.title, content=board.content, kind_board_name=kind_board_name)


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_boards(
    db: AsyncSession,
    page: int = 1,
    page_size: int = 20,
    sort_by: str = "created_at",
    sort_order: str = "desc",
    kind_board_id: int | None = None,
) -> PaginatedResponse:
    """
    Return one page of boards, optionally restricted to a category.

    Listing does not count as a read: ``read_count`` is left untouched.
    """
    if kind_board_id is not None:
        # Raises KindBoardNotFoundError for an unknown category.
        await kind_board_service.get_kind_board(db, kind_board_id)

    cache_key = cache.board_list_key(page, page_size, sort_by, sort_order, kind_board_id)
    cached = await cache.get(cache_key)
    if cached:
        return PaginatedResponse(**cached)

    count_q = select(func.count()).select_from(Board)
    if kind_board_id is not None:
        count_q = count_q.where(Board.kind_board_id == kind_board_id)
    total: int = (await db.execute(count_q)).scalar_one()

    sort_col = _resolve_sort_column(sort_by)
    direction = desc if sort_order == "desc" else asc
    boards_q = (
        select(Board, User.username, KindBoard.kind_board_name)
        .join(User, Board.user_id == User.id)
        .outerjoin(KindBoard, Board.kind_board_id == KindBoard.id)
        .order_by(direction(sort_col), direction(Board.id))
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    if kind_board_id is not None:
        boards_q = boards_q.where(Board.kind_board_id == kind_board_id)
    rows = (await db.execute(boards_q)).all()

    response = PaginatedResponse(
        items=[_board_row_to_dict(board, username, name) for board, username, name in rows],
        total=total,
        page=page,
        page_size=page_size,
        pages=math.ceil(total / page_size) if total > 0 else 0,
    )
    await cache.set(cache_key, response.model_dump(), ttl=settings.CACHE_TTL_LIST)
    return response


async def get_board(db: AsyncSession, board_id: int) -> Board:
    """
    Return the board identified by *board_id*, incrementing its read
    counter by exactly one.

    Raises ``BoardNotFoundError`` when the board does not exist.
    """
    board = await _load_board(db, board_id)
    board.read_count += 1
    await db.flush()
    return board


async def create_board(db: AsyncSession, data: BaseModel, acting_username: str) -> Board:
    """
    Create a board owned by *acting_username*.

    *data* is either view of the board transfer object (``BoardRequest`` or
    ``BoardResponse``).  Raises ``UserNotFoundError`` for an unknown user and
    ``KindBoardNotFoundError`` when a category name is given but unknown.
    """
    user = await user_service.get_user_by_username(db, acting_username)

    kind_board_id = None
    if data.kind_board_name is not None:
        kind_board = await kind_board_service.get_kind_board_by_name(db, data.kind_board_name)
        kind_board_id = kind_board.id

    board = Board(
        title=data.title,
        content=data.content,
        read_count=0,
        user_id=user.id,
        kind_board_id=kind_board_id,
    )
    db.add(board)
    await db.flush()

    await cache.invalidate_boards()
    logger.info("Board %d created by %s", board.id, user.username)
    return board


async def update_board(
    db: AsyncSession,
    board_id: int,
    data: BaseModel,
    acting_username: str,
    method: str | UpdateMethod = UpdateMethod.PATCH,
) -> Board:
    """
    Update a board in place with PATCH (merge) or PUT (full replace)
    semantics.

    Raises ``BoardNotFoundError`` for an unknown board, ``UserNotFoundError``
    for an unknown acting user and ``InvalidArgumentError`` for a PUT with a
    null title or content.  Ownership and read count never change here.

    The acting user only has to exist; unlike ``delete_board`` there is no
    owner check, so any known user may edit any board.
    """
    update_method = _resolve_method(method)
    board = await _load_board(db, board_id)
    await user_service.get_user_by_username(db, acting_username)

    if update_method is UpdateMethod.PUT:
        _check_full_replace(data)

    kind_board_name = getattr(data, "kind_board_name", None)
    if kind_board_name is not None:
        kind_board = await kind_board_service.get_kind_board_by_name(db, kind_board_name)
        board.kind_board_id = kind_board.id

    if update_method is UpdateMethod.PUT:
        _replace_fields(board, data)
    else:
        _merge_fields(board, data)

    board.updated_at = datetime.now(timezone.utc)
    await db.flush()
    await cache.invalidate_boards()
    logger.info("Board %d updated by %s (%s)", board.id, acting_username, update_method.value)
    return board


async def delete_board(db: AsyncSession, board_id: int, acting_username: str) -> bool:
    """
    Delete the board if *acting_username* is its owner.

    Returns True when deleted and False on an ownership mismatch (the board
    is kept).  Raises ``BoardNotFoundError`` when the board does not exist.
    """
    board = await _load_board(db, board_id)
    owner = await db.get(User, board.user_id)
    if owner is None or owner.username != acting_username:
        logger.info(
            "Refused delete of board %d by %r: owned by %r",
            board_id,
            acting_username,
            owner.username if owner else None,
        )
        return False

    await db.delete(board)
    await db.flush()
    await cache.invalidate_boards()
    logger.info("Board %d deleted by %s", board_id, acting_username)
    return True
