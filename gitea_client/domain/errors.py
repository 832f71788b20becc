"""Error type raised by every Gitea API operation."""
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed API call."""
    HTTP_ERROR = "HttpError"
    SERIALIZATION_ERROR = "SerializationError"
    TRANSPORT_ERROR = "TransportError"


class GiteaError(Exception):
    """Raised when a request to the Gitea API fails.
    
    Attributes:
        message: Response body text, parser message or connection error text
        kind: What went wrong (see ErrorKind)
        status_code: HTTP status of the response, or 400 when the request
            never produced one
    """
    
    def __init__(self, message: str, kind: ErrorKind, status_code: int):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
    
    @property
    def is_not_found(self) -> bool:
        return self.kind == ErrorKind.HTTP_ERROR and self.status_code == 404
    
    def __str__(self) -> str:
        return self.message
    
    def __repr__(self) -> str:
        return (
            f"GiteaError(kind={self.kind.value}, status_code={self.status_code}, "
            f"message={self.message!r})"
        )
