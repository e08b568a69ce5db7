"""
Tracker key entity models.

A tracker key is a time-limited credential granting a user access to the
tracker. A user may hold several keys; only keys that stay valid for long
enough are handed out again.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import BigInteger, Field

from ..base import Base


class TrackerKey(Base, table=True):
    """Entity for a tracker key.

    Table: torrust_tracker_keys
    """

    __tablename__ = "torrust_tracker_keys"

    key_id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, index=True)
    key: str = Field(max_length=64)
    valid_until: int = Field(sa_type=BigInteger, description="Expiry in unix seconds")

    def __repr__(self) -> str:
        return f"TrackerKey(user_id={self.user_id}, valid_until={self.valid_until})"
