from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str = "127.0.0.1"
    port: int = 3100
    debug: bool = False
    admin_password: str  # The single shared secret accepted by /api/auth/login
    cors_origins: list[str] = []
    session_sweep_interval: int = 0  # Seconds between expired-session sweeps, 0 disables the sweep
    # Build metadata injected during Docker build via environment variables
    git_commit_hash: str = "unknown"
    git_commit_date: str = "unknown"
    build_time: str = "unknown"

    model_config = {
        "env_file": [".env"],
        "env_prefix": "EVENTBOARD_",
        "extra": "ignore",
    }
