import secrets

from eventboard.core.core import Service
from eventboard.core.modules.session.models import AuthToken
from eventboard.errors import AuthenticationError


class AccessService(Service):
    def verify_password(self, password: str) -> bool:
        """Check a submitted password against the configured admin password in constant time."""
        expected = self.core.config.admin_password
        return secrets.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))

    def ensure_authenticated(self, auth_token: AuthToken | None) -> AuthToken:
        """Ensure the token belongs to a live session."""
        if auth_token is None or not self.core.services.session.validate_session(auth_token):
            raise AuthenticationError
        return auth_token
