"""
Bearer-token verification and profile lookup against Supabase.

The supabase client is synchronous, so each call runs in the threadpool.
"""
import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from supabase import Client

from medrelay.api.models.profile import PatientProfile
from medrelay.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

PROFILE_TABLE = "profiles"
PROFILE_COLUMNS = "medical_history, allergies, current_medication"

MISSING_HEADER_MESSAGE = "Missing Authorization header"
UNAUTHORIZED_MESSAGE = "Invalid or unauthorized user"


def extract_bearer_token(authorization: str) -> str:
    """Strip the "Bearer " scheme prefix from an Authorization header value."""
    return authorization.replace("Bearer ", "", 1).strip()


class ProfileGateway:
    """Verifies callers and reads their stored medical profile."""

    def __init__(self, client: Client):
        self.client = client

    async def authenticate(self, authorization: Optional[str], user_id: Optional[str]) -> str:
        """
        Verify that the bearer token belongs to `user_id`.

        Args:
            authorization: Raw Authorization header value
            user_id: Identifier the caller claims in the request body, if any

        Returns:
            The verified user id

        Raises:
            AuthenticationError: If the header is missing, the token is rejected,
                or it resolves to a different user
        """
        if not authorization:
            raise AuthenticationError(MISSING_HEADER_MESSAGE)

        token = extract_bearer_token(authorization)
        try:
            response = await run_in_threadpool(self.client.auth.get_user, token)
        except Exception as e:
            logger.warning(f"Token verification failed: {e}")
            raise AuthenticationError(UNAUTHORIZED_MESSAGE) from e

        user = getattr(response, "user", None) if response else None
        if user is None or str(user.id) != user_id:
            raise AuthenticationError(UNAUTHORIZED_MESSAGE)

        return user_id

    async def fetch_profile(self, user_id: str) -> Optional[PatientProfile]:
        """
        Look up the profile row for `user_id`.

        Missing rows and lookup errors both return None; the caller proceeds
        without patient context.
        """
        try:
            response = await run_in_threadpool(self._select_profile, user_id)
        except Exception as e:
            logger.warning(
                "No profile data found or multiple rows returned. Skipping patient context.",
                extra={"user_id": user_id, "error": str(e)},
            )
            return None

        data = getattr(response, "data", None) if response else None
        if not data:
            return None
        return PatientProfile.model_validate(data)

    def _select_profile(self, user_id: str):
        return (
            self.client.table(PROFILE_TABLE)
            .select(PROFILE_COLUMNS)
            .eq("id", user_id)
            .maybe_single()
            .execute()
        )
