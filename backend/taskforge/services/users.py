"""User Service — account creation and lookup.

Invariants:
    - Passwords are hashed before they reach the repository
    - Email uniqueness is enforced by the schema; a duplicate surfaces as
      DatabaseError from the session manager
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.core.passwords import hash_password
from taskforge.core.roles import DEFAULT_ROLE
from taskforge.models.user import User
from taskforge.services.repository import CrudRepository


class UserService:
    def __init__(self, db: AsyncSession):
        self.users = CrudRepository(db, User)

    async def create(
        self,
        email: str,
        username: str,
        password: str,
        role: str = DEFAULT_ROLE,
        full_name: str | None = None,
    ) -> User:
        return await self.users.create(
            email=email,
            username=username,
            password=hash_password(password),
            role=role,
            full_name=full_name,
        )

    async def get(self, user_id: UUID) -> User | None:
        return await self.users.get(user_id)
