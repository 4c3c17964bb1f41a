"""
Users API - User Lookup Gateway
Claim-based authorization in front of the user repository
"""

from datetime import datetime
from typing import List, Optional, Dict
from loguru import logger

from users_api.auth.context import RequestContext
from users_api.core.exceptions import AccessDenied, MissingAuthContext
from users_api.models.user import User
from users_api.repositories.user_repository import UserRepository
from users_api.schemas.user import Claims

SERVICE_NAME = "users-api"


def equals_ignore_case(a: str, b: str) -> bool:
    """
    Character-by-character case-insensitive equality

    Lengths must match: "straße" and "strasse" are different names.
    """
    if len(a) != len(b):
        return False
    return all(
        c1 == c2 or c1.upper() == c2.upper() or c1.upper().lower() == c2.upper().lower()
        for c1, c2 in zip(a, b)
    )


class UserLookupGateway:
    """
    Read access to users for the HTTP layer

    A caller may only fetch their own record. Listing is not filtered.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def get_user_by_username(
        self,
        context: RequestContext,
        username: str
    ) -> Optional[User]:
        """
        Get one user, if the caller owns it

        Args:
            context: Request context populated by the auth middleware
            username: Username taken from the URL path

        Returns:
            Whatever the repository returns, None when not found

        Raises:
            MissingAuthContext: No claims on the request
            AccessDenied: Path username differs from the username claim
        """
        claims = context.claims
        if not isinstance(claims, Claims):
            logger.error("❌ No JWT claims on request, is the auth middleware installed?")
            raise MissingAuthContext()

        if not equals_ignore_case(username, claims.username):
            logger.warning(f"🚫 {claims.username} denied access to user {username}")
            raise AccessDenied()

        logger.debug(f"Looking up user {username}")
        return await self.repository.find_one_by_username(username)

    async def list_users(self) -> List[User]:
        """Get all users in repository order"""
        return list(await self.repository.find_all())

    @staticmethod
    def health_check() -> Dict[str, str]:
        """Static status with the current server time"""
        return {
            "status": "OK",
            "service": SERVICE_NAME,
            "timestamp": datetime.now().isoformat(),
        }
