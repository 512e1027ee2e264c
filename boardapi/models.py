from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from boardapi.database import Base


class AuthorityType(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    nickname: Mapped[Optional[str]] = mapped_column(String(150), nullable=True)
    authority: Mapped[AuthorityType] = mapped_column(
        Enum(AuthorityType, name="authority_type"),
        default=AuthorityType.USER,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


# ---------------------------------------------------------------------------
# KindBoard (board category)
# ---------------------------------------------------------------------------
class KindBoard(Base):
    __tablename__ = "kind_boards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind_board_name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------
class Board(Base):
    __tablename__ = "boards"

    __table_args__ = (
        # Category listing sorted by date
        Index("ix_boards_kind_board_id_created_at", "kind_board_id", "created_at"),
        # A user's boards sorted by date
        Index("ix_boards_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    read_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    # Stamped by the board service on content updates only; the read counter
    # bump must leave it alone.
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # References are plain ids; services resolve them with explicit lookups.
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    kind_board_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("kind_boards.id", ondelete="SET NULL"), nullable=True
    )
