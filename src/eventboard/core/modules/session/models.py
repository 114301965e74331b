"""Session management models."""

from datetime import timedelta
from typing import NewType

AuthToken = NewType("AuthToken", str)

# Fixed lifetime of a session, counted from login. Use does not extend it.
SESSION_TTL = timedelta(hours=24)
