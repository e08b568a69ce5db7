"""
User entity models.

This module contains the database entity for registered index users. Users
are looked up by username or email; uniqueness of either is assumed by the
callers and not enforced by the schema.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class User(Base, table=True):
    """Entity for a registered user.

    Table: torrust_users
    """

    __tablename__ = "torrust_users"

    user_id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=64, index=True)
    email: str = Field(max_length=320, index=True)
    email_verified: bool = Field(default=False)
    # Password hash, never the plain text
    password: str = Field(max_length=255)
    administrator: bool = Field(default=False)

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id}, username={self.username})"
