"""Authentication header values for the Gitea API."""
import base64
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Auth:
    """Immutable authentication setting.
    
    Use the factory methods rather than the constructor:
    Auth.token(...), Auth.basic(...) or Auth.none().
    """
    scheme: Optional[str] = None
    credentials: Optional[str] = None
    
    def __post_init__(self):
        # Malformed header values are a configuration error, not a runtime one
        value = self.header_value
        if value is not None and not _is_valid_header_value(value):
            raise ValueError(f"Invalid characters in {self.scheme} credentials")
    
    @classmethod
    def token(cls, token: str) -> 'Auth':
        """Personal access token, sent as `Authorization: token <token>`."""
        return cls(scheme="token", credentials=str(token))
    
    @classmethod
    def basic(cls, username: str, password: str) -> 'Auth':
        """HTTP basic credentials, sent base64 encoded."""
        raw = f"{username}:{password}".encode("utf-8")
        return cls(scheme="Basic", credentials=base64.b64encode(raw).decode("ascii"))
    
    @classmethod
    def none(cls) -> 'Auth':
        """No Authorization header at all."""
        return cls()
    
    @property
    def header_value(self) -> Optional[str]:
        if self.scheme is None:
            return None
        return f"{self.scheme} {self.credentials}"
    
    def __repr__(self) -> str:
        return f"Auth(scheme={self.scheme!r})"


def _is_valid_header_value(value: str) -> bool:
    return all(c == "\t" or 32 <= ord(c) < 127 for c in value)
