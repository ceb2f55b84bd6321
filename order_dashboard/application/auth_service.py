from loguru import logger

from order_dashboard.domain.errors import AuthError
from order_dashboard.domain.viewer import ViewerIdentity


class CredentialAuthService:
    """Placeholder login check backed by two shared secrets.

    This is not a security boundary: it only decides which viewer identity the
    dashboard runs under. Replace with a real identity provider before exposing it.
    """

    def __init__(
        self, admin_username: str, admin_password: str, user_password: str
    ) -> None:
        self._admin_username = admin_username
        self._admin_password = admin_password
        self._user_password = user_password

    def resolve(self, username: str, password: str) -> ViewerIdentity:
        """Return the identity for ``username``/``password``.

        Raises:
            AuthError: "Invalid credentials" when neither rule matches.
        """
        if username == self._admin_username and password == self._admin_password:
            logger.info("Admin login")
            return ViewerIdentity.admin(username)

        subscriber = username.strip()
        if password == self._user_password and subscriber:
            logger.info(f"Subscriber login: {subscriber}")
            return ViewerIdentity.subscriber(subscriber)

        logger.warning(f"Rejected login for {username!r}")
        raise AuthError("Invalid credentials")
