from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from boardapi.models import AuthorityType


# --- User ---

class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    nickname: str | None = None
    authority: AuthorityType = AuthorityType.USER


class UserCreate(UserBase):
    pass


class UserResponse(UserBase):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- KindBoard ---

class KindBoardCreate(BaseModel):
    kind_board_name: str = Field(min_length=1, max_length=100)


class KindBoardResponse(KindBoardCreate):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# --- Board ---
#
# BoardRequest / BoardResponse are the two views of the board transfer
# object; neither carries the read counter or audit timestamps.

class BoardRequest(BaseModel):
    title: str = Field(max_length=300)
    content: str
    kind_board_name: str | None = None


class BoardResponse(BaseModel):
    title: str
    content: str
    kind_board_name: str | None = None


class BoardUpdate(BaseModel):
    # None means "not supplied" for both PATCH and PUT; PUT rejects it for
    # title and content in the service layer.
    title: str | None = Field(None, max_length=300)
    content: str | None = None
    kind_board_name: str | None = None


class BoardSummary(BaseModel):
    id: int
    title: str
    read_count: int
    user_id: int
    username: str | None
    kind_board_id: int | None
    kind_board_name: str | None
    created_at: datetime


class BoardDetail(BoardSummary):
    content: str
    updated_at: datetime | None = None


# --- Pagination ---

class PaginatedResponse(BaseModel):
    items: list  # Will be typed in router
    total: int
    page: int
    page_size: int
    pages: int


# --- Metrics ---

class MetricsResponse(BaseModel):
    total_boards: int
    total_kind_boards: int
    total_users: int
    total_reads: int
    avg_reads_per_board: float
    cache_info: dict = {}
