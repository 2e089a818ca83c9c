"""
Auth Store
Observable session/profile state bridged from Supabase auth events
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Union

from postgrest.exceptions import APIError
from supabase import Client

from shared.schemas.marketplace import Profile, ProfileSetupForm, ProfileUpdate
from shared.utils.config import get_supabase_config
from shared.utils.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

# PostgREST code for ".single()" matching zero rows
NO_ROWS_CODE = "PGRST116"

IMMUTABLE_PROFILE_FIELDS = ("id", "created_at", "updated_at")


class AuthError(Exception):
    """Base exception for the session adapter"""
    pass


class AuthenticationRequiredError(AuthError):
    """Raised when a profile mutation runs without a signed-in user"""
    pass


class SupabaseUnavailableError(AuthError):
    """Raised when no Supabase client is configured"""
    pass


@dataclass(frozen=True)
class AuthState:
    """Snapshot published to subscribers"""
    user: Any = None
    profile: Optional[Profile] = None
    session: Any = None
    loading: bool = True

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


Subscriber = Callable[[AuthState], None]


class AuthStore:
    """Writable value with a callback registry"""

    def __init__(self, initial: Optional[AuthState] = None):
        self._state = initial or AuthState()
        self._subscribers: List[Subscriber] = []

    def get(self) -> AuthState:
        return self._state

    def set(self, state: AuthState):
        self._state = state
        for callback in list(self._subscribers):
            callback(state)

    def update(self, updater: Callable[[AuthState], AuthState]):
        self.set(updater(self._state))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; it is called at once with the current value"""
        self._subscribers.append(callback)
        callback(self._state)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


class AuthService:
    """Session and profile operations against Supabase"""

    def __init__(
        self,
        client: Optional[Client] = None,
        store: Optional[AuthStore] = None,
        redirect_url: Optional[str] = None,
        profiles_table: Optional[str] = None
    ):
        config = get_supabase_config()
        self._client = client
        self.store = store or AuthStore()
        self.redirect_url = redirect_url or config.redirect_url
        self.profiles_table = profiles_table or config.profiles_table
        self._subscription = None

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase_client().get_client()
        if self._client is None:
            raise SupabaseUnavailableError("Supabase client not available")
        return self._client

    async def init(self):
        """Publish the initial session and start listening for auth changes"""
        session = self.client.auth.get_session()

        if session:
            self._set_session(session)
        else:
            self.store.update(lambda state: replace(state, loading=False))

        self._subscription = self.client.auth.on_auth_state_change(self._on_auth_state_change)

    def close(self):
        """Stop listening for auth changes"""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_auth_state_change(self, event: str, session: Any):
        if event == "SIGNED_IN" and session:
            self._set_session(session)
        elif event == "SIGNED_OUT":
            self.store.set(AuthState(loading=False))

    def _set_session(self, session: Any):
        user = session.user
        profile = self._fetch_profile(user.id)

        self.store.set(AuthState(
            user=user,
            profile=profile,
            session=session,
            loading=False
        ))

    async def sign_in_with_google(self) -> str:
        """Start the Google OAuth flow, returns the provider redirect URL"""
        return self._sign_in_with_oauth("google", "Google")

    async def sign_in_with_apple(self) -> str:
        """Start the Apple OAuth flow, returns the provider redirect URL"""
        return self._sign_in_with_oauth("apple", "Apple")

    def _sign_in_with_oauth(self, provider: str, label: str) -> str:
        try:
            response = self.client.auth.sign_in_with_oauth({
                "provider": provider,
                "options": {
                    "redirect_to": self.redirect_url
                }
            })
        except Exception as e:
            logger.error(f"Error signing in with {label}: {e}")
            raise

        return response.url

    async def sign_out(self):
        try:
            self.client.auth.sign_out()
        except Exception as e:
            logger.error(f"Error signing out: {e}")
            raise

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """
        Fetch a profile by user id

        Returns None both when the row does not exist and when the query
        fails for any other reason.
        """
        return self._fetch_profile(user_id)

    def _fetch_profile(self, user_id: str) -> Optional[Profile]:
        try:
            try:
                response = (
                    self.client.table(self.profiles_table)
                    .select("*")
                    .eq("id", user_id)
                    .single()
                    .execute()
                )
            except APIError as e:
                if e.code == NO_ROWS_CODE:
                    # Profile doesn't exist yet
                    return None
                raise

            return Profile.model_validate(response.data)
        except Exception as e:
            logger.error(f"Error fetching profile: {e}")
            return None

    def _require_user(self) -> Any:
        response = self.client.auth.get_user()
        user = response.user if response else None
        if not user:
            raise AuthenticationRequiredError("No authenticated user")
        return user

    async def create_profile(self, profile_data: Union[ProfileSetupForm, Dict[str, Any]]) -> Profile:
        """Insert the signed-in user's profile row, is_admin always false"""
        user = self._require_user()

        if isinstance(profile_data, ProfileSetupForm):
            profile_data = profile_data.model_dump(mode="json", exclude_none=True)

        row = {
            **profile_data,
            "id": user.id,
            "is_admin": False
        }

        try:
            response = self.client.table(self.profiles_table).insert(row).execute()
        except Exception as e:
            logger.error(f"Error creating profile: {e}")
            raise

        profile = Profile.model_validate(_first_row(response.data))
        self.store.update(lambda state: replace(state, profile=profile))
        return profile

    async def update_profile(self, updates: Union[ProfileUpdate, Dict[str, Any]]) -> Profile:
        """Update the signed-in user's own profile row"""
        user = self._require_user()

        if isinstance(updates, ProfileUpdate):
            changes: Dict[str, Any] = updates.model_dump(mode="json", exclude_unset=True)
        else:
            changes = dict(updates)

        # Identity and timestamps are owned by the database
        for field in IMMUTABLE_PROFILE_FIELDS:
            changes.pop(field, None)

        try:
            response = (
                self.client.table(self.profiles_table)
                .update(changes)
                .eq("id", user.id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating profile: {e}")
            raise

        profile = Profile.model_validate(_first_row(response.data))
        self.store.update(lambda state: replace(state, profile=profile))
        return profile


def _first_row(data: Any) -> Dict[str, Any]:
    if isinstance(data, list):
        if not data:
            raise AuthError("Query returned no rows")
        return data[0]
    return data


# Global store and service instances
auth = AuthStore()
_auth_service: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get auth service singleton bound to the global store"""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService(store=auth)
    return _auth_service
