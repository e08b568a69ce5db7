"""
Page entity models.

This module contains the database entity for routable content pages. The
route is the uniqueness key and is enforced by a unique index, so concurrent
inserts for one route cannot both succeed.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import BigInteger, Field, Text

from ..base import Base


class Page(Base, table=True):
    """Entity for a content page.

    Table: torrust_pages
    """

    __tablename__ = "torrust_pages"

    page_id: Optional[int] = Field(default=None, primary_key=True)
    route: str = Field(max_length=255, unique=True, index=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)
    creation_date: int = Field(sa_type=BigInteger, description="Creation time in unix seconds")

    def __repr__(self) -> str:
        return f"Page(route={self.route}, title={self.title})"
