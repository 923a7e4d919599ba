"""User operations."""

from typing import TYPE_CHECKING, Optional

from ..exceptions import EntityNotFoundError
from ..models.account_models import GetAuthenticatedUserResponse, User

if TYPE_CHECKING:
    from ..client import SnapchatAdsClient


class UserService:
    """Provide access to the authenticated user.

    The ``me`` endpoint does not use the usual envelope, so this service
    does not build on ``ResourceService``.
    """

    def __init__(self, client: "SnapchatAdsClient"):
        self._client = client

    async def get_authenticated_user(self, timeout: Optional[float] = None) -> User:
        """Return the user the access token belongs to.

        :param timeout: Optional deadline in seconds
        :type timeout: Optional[float]
        :return: The authenticated user
        :rtype: User
        :raises EntityNotFoundError: If the response holds no user
        """
        response, _ = await self._client.request(
            "GET", "me", GetAuthenticatedUserResponse, timeout=timeout
        )
        if response.me is None:
            raise EntityNotFoundError(
                "no user returned from snapchat api (get authenticated user)",
                request_id=response.request_id,
            )
        return response.me
