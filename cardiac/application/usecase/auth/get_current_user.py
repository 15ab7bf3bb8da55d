"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from cardiac.domain.service import UserService
from cardiac.domain.value import UserId

from .common import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified session token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase:
    """Use case for reading the authenticated user, share points included."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the user named by the session.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetCurrentUserResponse(user=UserInfo.from_user(user))
