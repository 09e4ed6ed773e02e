"""User records for event registration.

The store is in-memory; swap `get_user_store` for a database-backed
implementation exposing the same two methods.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    name: str
    email: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class UserStore:
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._users.get(email.strip().lower())

    async def create(self, name: str, email: str) -> User:
        user = User(name=name.strip(), email=email.strip())
        self._users[user.email.lower()] = user
        return user


_store = UserStore()


def get_user_store() -> UserStore:
    return _store
