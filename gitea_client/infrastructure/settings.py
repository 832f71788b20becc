"""Environment-driven configuration for connecting to a Gitea instance."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from gitea_client.domain.auth import Auth


@dataclass(frozen=True)
class GiteaSettings:
    """Connection settings.

    A token takes precedence over basic credentials when both are set.
    """
    base_url: str
    token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: Optional[float] = None

    @property
    def auth(self) -> Auth:
        if self.token:
            return Auth.token(self.token)
        if self.username:
            return Auth.basic(self.username, self.password or "")
        return Auth.none()

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> 'GiteaSettings':
        """Build settings from GITEA_* environment variables.

        Args:
            load_env_file: Load a .env (or env) file from the working directory first

        Raises:
            ValueError: If GITEA_URL is missing or GITEA_TIMEOUT is not a number
        """
        if load_env_file:
            # Load environment variables from .env or env file
            load_dotenv('.env') or load_dotenv('env')

        base_url = os.getenv("GITEA_URL")
        if not base_url:
            raise ValueError("GITEA_URL environment variable is required")

        timeout = os.getenv("GITEA_TIMEOUT")
        try:
            timeout_seconds = float(timeout) if timeout else None
        except ValueError as e:
            raise ValueError(f"GITEA_TIMEOUT must be a number of seconds, got {timeout!r}") from e

        return cls(
            base_url=base_url,
            token=os.getenv("GITEA_TOKEN") or None,
            username=os.getenv("GITEA_USERNAME") or None,
            password=os.getenv("GITEA_PASSWORD") or None,
            timeout=timeout_seconds
        )
