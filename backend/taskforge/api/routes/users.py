"""User Routes — account provisioning by admins/managers and profile lookup.

Invariants:
    - POST requires the "register" permission and passes USER_CREATE rules
    - Responses never include the password hash
"""

from typing import Any, Literal
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.api.dependencies import parse_body, require_roles, validated_body
from taskforge.core import rule_sets
from taskforge.core.errors import ResourceNotFoundError
from taskforge.core.roles import DEFAULT_ROLE, PERMISSIONS
from taskforge.infrastructure.database import get_db
from taskforge.schemas.user import UserResponse
from taskforge.services.users import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str
    username: str
    password: str
    role: Literal["admin", "manager", "user", "viewer"] = DEFAULT_ROLE
    full_name: str | None = None


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_roles(PERMISSIONS["register"]))],
)
async def create_user(
    body: dict[str, Any] = Depends(validated_body(rule_sets.USER_CREATE)),
    db: AsyncSession = Depends(get_db),
):
    payload = parse_body(UserCreate, body)
    return await UserService(db).create(**payload.model_dump())


@router.get(
    "/{user_id}", response_model=UserResponse,
    dependencies=[Depends(require_roles(PERMISSIONS["view"]))],
)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await UserService(db).get(user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user
