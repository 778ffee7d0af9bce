"""ORM models for Rolestyle.

Defines RoleRow, the persisted form of a RoleDefinition.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


class RoleRow(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # registry order; lookup is first-match so order is part of the data
    position: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    int_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    string_id: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    badge_icon: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    name_color: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    chat_color: Mapped[str] = mapped_column(String(16), nullable=False, default="")
    permissions: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
