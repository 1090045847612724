import hmac
import logging

from app.core.config import Settings
from app.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


class AuthService:
    """
    Checks admin credentials against the configured pair.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def login(self, username: str, password: str) -> str:
        """
        Return the admin token if the credentials match.

        Raises:
            AuthenticationError: On any mismatch, including empty values.
        """
        expected_user = self.settings.admin_username.encode()
        expected_password = self.settings.admin_password.get_secret_value().encode()

        user_ok = hmac.compare_digest(username.encode(), expected_user)
        password_ok = hmac.compare_digest(password.encode(), expected_password)
        if not (username and password and user_ok and password_ok):
            logger.info("Rejected admin login for user %r", username)
            raise AuthenticationError("Invalid credentials")

        return self.settings.admin_token.get_secret_value()
