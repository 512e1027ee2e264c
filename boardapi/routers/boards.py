from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from boardapi.database import get_db
from boardapi.dependencies import PaginationParams, acting_username
from boardapi.exceptions import ForbiddenError
from boardapi.schemas import BoardDetail, BoardRequest, BoardUpdate, PaginatedResponse
from boardapi.services import board_service
from boardapi.services.board_service import UpdateMethod

router = APIRouter(prefix="/api/v1/boards", tags=["boards"])

@router.get("", response_model=PaginatedResponse)
async def list_boards(
    pagination: PaginationParams = Depends(),
    kind_board_id: int | None = Query(None, description="Only boards in this category."),
    db: AsyncSession = Depends(get_db),
):
    return await board_service.get_boards(
        db,
        pagination.page,
        pagination.page_size,
        pagination.sort_by,
        pagination.sort_order,
        kind_board_id=kind_board_id,
    )

@router.get("/{board_id}", response_model=BoardDetail)
async def get_board(board_id: int, db: AsyncSession = Depends(get_db)):
    board = await board_service.get_board(db, board_id)
    return await board_service.describe_board(db, board)

@router.post("", status_code=201, response_model=BoardDetail)
async def create_board(
    data: BoardRequest,
    username: str = Depends(acting_username),
    db: AsyncSession = Depends(get_db),
):
    board = await board_service.create_board(db, data, username)
    return await board_service.describe_board(db, board)

@router.put("/{board_id}", response_model=BoardDetail)
async def replace_board(
    board_id: int,
    data: BoardUpdate,
    username: str = Depends(acting_username),
    db: AsyncSession = Depends(get_db),
):
    board = await board_service.update_board(db, board_id, data, username, UpdateMethod.PUT)
    return await board_service.describe_board(db, board)

@router.patch("/{board_id}", response_model=BoardDetail)
async def patch_board(
    board_id: int,
    data: BoardUpdate,
    username: str = Depends(acting_username),
    db: AsyncSession = Depends(get_db),
):
    board = await board_service.update_board(db, board_id, data, username, UpdateMethod.PATCH)
    return await board_service.describe_board(db, board)

@router.delete("/{board_id}", status_code=204)
async def delete_board(
    board_id: int,
    username: str = Depends(acting_username),
    db: AsyncSession = Depends(get_db),
):
    deleted = await board_service.delete_board(db, board_id, username)
    if not deleted:
        raise ForbiddenError("Only the author may delete this board")
