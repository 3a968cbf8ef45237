"""Environment settings for browser tests (read after loading .env)."""
import os

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    """Target application and login credentials."""
    base_url: str = ""
    username: str = ""
    password: str = ""
    log_level: str = "INFO"
    token_key: str = "TOKEN"

    def app_url(self, path: str = "") -> str:
        """Join the base URL with a path, e.g. app_url("/login")."""
        return f"{self.base_url.rstrip('/')}{path}" if path else self.base_url


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Load .env (if present) and build Settings from the environment."""
    load_dotenv(dotenv_path)
    return Settings(
        base_url=os.getenv("APP_URL", ""),
        username=os.getenv("APP_USERNAME", ""),
        password=os.getenv("APP_PASSWORD", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        token_key=os.getenv("APP_TOKEN_KEY", "TOKEN"),
    )
