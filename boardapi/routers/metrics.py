from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from boardapi.database import get_db
from boardapi.models import Board, KindBoard, User
from boardapi.schemas import MetricsResponse
from boardapi.cache import cache

router = APIRouter(prefix="/api/v1/metrics", tags=["metrics"])

@router.get("", response_model=MetricsResponse)
async def get_metrics(db: AsyncSession = Depends(get_db)):

    total_boards = (await db.execute(select(func.count()).select_from(Board))).scalar_one()

    total_kind_boards = (await db.execute(select(func.count()).select_from(KindBoard))).scalar_one()

    total_users = (await db.execute(select(func.count()).select_from(User))).scalar_one()

    total_reads = (await db.execute(select(func.coalesce(func.sum(Board.read_count), 0)))).scalar_one()

    avg_reads = total_reads / total_boards if total_boards > 0 else 0

    return MetricsResponse(
        total_boards=total_boards,
        total_kind_boards=total_kind_boards,
        total_users=total_users,
        total_reads=total_reads,
        avg_reads_per_board=round(avg_reads, 2),
        cache_info=cache.stats,
    )
