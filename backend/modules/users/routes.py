"""
User API endpoints.

Identity is caller-supplied: there is no authentication layer.
"""

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_user_directory

from .interfaces import IUserDirectory
from .models import RegisterUserRequest, User, UpgradeResponse

router = APIRouter()


@router.post("", response_model=User)
async def register_user(
    request: RegisterUserRequest,
    response: Response,
    directory: IUserDirectory = Depends(get_user_directory),
) -> User:
    """
    Return the user for this email, creating it if needed.

    Responds 201 when the user was created and 200 when it already existed.
    """
    resolved = await directory.resolve_or_create(
        request.email, request.name, request.image
    )
    response.status_code = (
        status.HTTP_201_CREATED if resolved.created else status.HTTP_200_OK
    )
    return resolved.user


@router.get("/{email}", response_model=User)
async def get_user(
    email: str,
    directory: IUserDirectory = Depends(get_user_directory),
) -> User:
    """Get a user's profile and membership tier."""
    return await directory.get_user(email)


@router.put("/{email}/upgrade", response_model=UpgradeResponse)
async def upgrade_user(
    email: str,
    directory: IUserDirectory = Depends(get_user_directory),
) -> UpgradeResponse:
    """
    Mark a user as premium.

    Called by the client after the checkout success redirect. Payment is
    not verified server-side.
    """
    upgraded = await directory.upgrade(email)
    message = "User upgraded to premium" if upgraded else "No user to upgrade"
    return UpgradeResponse(message=message, upgraded=upgraded)
