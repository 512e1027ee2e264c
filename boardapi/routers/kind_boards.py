from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from boardapi.database import get_db
from boardapi.schemas import KindBoardCreate, KindBoardResponse
from boardapi.services import kind_board_service

router = APIRouter(prefix="/api/v1/kind-boards", tags=["kind-boards"])

@router.get("", response_model=list[KindBoardResponse])
async def list_kind_boards(db: AsyncSession = Depends(get_db)):
    return await kind_board_service.get_kind_boards(db)

@router.get("/by-name/{name}", response_model=KindBoardResponse)
async def get_kind_board_by_name(name: str, db: AsyncSession = Depends(get_db)):
    kind_board = await kind_board_service.get_kind_board_by_name(db, name)
    return KindBoardResponse.model_validate(kind_board)

@router.get("/{kind_board_id}", response_model=KindBoardResponse)
async def get_kind_board(kind_board_id: int, db: AsyncSession = Depends(get_db)):
    kind_board = await kind_board_service.get_kind_board(db, kind_board_id)
    return KindBoardResponse.model_validate(kind_board)

@router.post("", status_code=201, response_model=KindBoardResponse)
async def create_kind_board(data: KindBoardCreate, db: AsyncSession = Depends(get_db)):
    kind_board = await kind_board_service.create_kind_board(db, data.kind_board_name)
    return KindBoardResponse.model_validate(kind_board)
