"""
Authentication of the blog administrator.

The blog has a single administrator whose credentials come from
settings.  A successful login registers the administrator in the
store's user collection (once) and issues a signed bearer token that
unlocks the privileged endpoints.
"""

from __future__ import annotations

import hmac
import logging
from typing import Optional

from blog_api.app.core.config import Settings
from blog_api.app.core.security import create_admin_token, verify_password
from blog_api.app.core.store import BlogStore
from blog_api.app.schemas.user import LoginResponse, UserRead

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: BlogStore, app_settings: Settings) -> None:
        self.store = store
        self.settings = app_settings

    def check_credentials(self, username: Optional[str], password: Optional[str]) -> bool:
        """Return whether ``username``/``password`` match the configured admin.

        A configured ``admin_password_hash`` takes precedence over the
        plain ``admin_password``.  With neither configured every login
        is refused.
        """
        if not username or not password:
            return False
        if not self.settings.admin_password and not self.settings.admin_password_hash:
            logger.warning("Login refused: no administrator password is configured")
            return False
        if not hmac.compare_digest(username.encode("utf-8"), self.settings.admin_username.encode("utf-8")):
            return False
        if self.settings.admin_password_hash:
            return verify_password(password, self.settings.admin_password_hash)
        return hmac.compare_digest(password.encode("utf-8"), self.settings.admin_password.encode("utf-8"))

    async def login(self, username: Optional[str], password: Optional[str]) -> Optional[LoginResponse]:
        """Authenticate and return a token, or ``None`` on bad credentials."""
        if not self.check_credentials(username, password):
            logger.warning("Failed login attempt for %r", username)
            return None
        with self.store.lock:
            user = self.store.find_user(self.settings.admin_username)
            if user is None:
                user = UserRead(
                    id=self.store.next_id("users"),
                    username=self.settings.admin_username,
                    email=self.settings.admin_email,
                )
                self.store.users.append(user)
        token = create_admin_token(user.id, user.username, app_settings=self.settings)
        logger.info("Administrator %s logged in", user.username)
        return LoginResponse(token=token, user=user.model_copy())
