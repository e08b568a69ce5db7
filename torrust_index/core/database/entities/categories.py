"""
Category entity models.

Categories are only ever checked for existence by name.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Category(Base, table=True):
    """Entity for a torrent category.

    Table: torrust_categories
    """

    __tablename__ = "torrust_categories"

    category_id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=64, unique=True, index=True)

    def __repr__(self) -> str:
        return f"Category(category_id={self.category_id}, name={self.name})"
