"""User Routes — CRUD endpoints for the user resource.

Invariants:
    - Routes contain no business logic: one UserService call each
    - Request shape (lengths, email format, query bounds) validated by Pydantic/FastAPI
      before the service runs; page and size are capped at 2**31 - 1
    - Status codes: list/get 200, create 201, update 202, delete 204
"""

from fastapi import APIRouter, Depends, Query, status

from user_registry.api.dependencies import get_user_service
from user_registry.config import get_settings
from user_registry.core.domain_types import UserId
from user_registry.schemas.user import UserCreate, UserPage, UserResponse, UserUpdate
from user_registry.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])

# 32-bit signed ceiling; keeps page * size inside a BIGINT OFFSET
PAGE_PARAM_MAX = 2**31 - 1


@router.get("", response_model=UserPage)
async def list_users(
    page: int = Query(0, ge=0, le=PAGE_PARAM_MAX),
    size: int = Query(get_settings().default_page_size, ge=1, le=PAGE_PARAM_MAX),
    sort_by: str = Query("id", alias="sortBy", min_length=1),
    direction: str = Query("asc"),
    service: UserService = Depends(get_user_service),
):
    """List users, one page at a time. Inactive users are included."""
    return await service.list_users(page, size, sort_by, direction)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    return await service.get_user(UserId(user_id))


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create_user(body)


@router.put(
    "/{user_id}", response_model=UserResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def update_user(
    user_id: int,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """Overwrite username, email and names. Password is not updatable here."""
    return await service.update_user(UserId(user_id), body)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_user(
    user_id: int, service: UserService = Depends(get_user_service),
) -> None:
    """Soft delete: the user stays fetchable with active=false."""
    await service.delete_user(UserId(user_id))
