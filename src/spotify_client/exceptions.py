"""Exception classes for the Spotify API client."""

from typing import Optional


class SpotifyClientError(Exception):
    """Base exception for all Spotify API errors.

    Attributes:
        status: HTTP status returned by Spotify (None for transport failures)
        message: Error message from Spotify
    """

    def __init__(self, status: Optional[int], message: str):
        """Initialize Spotify error.

        Args:
            status: HTTP status code, if the request reached Spotify
            message: Human-readable error message
        """
        self.status = status
        self.message = message
        if status is None:
            super().__init__(message)
        else:
            super().__init__(f"Spotify Error {status}: {message}")


class SpotifyParameterError(SpotifyClientError):
    """Malformed request (HTTP 400)."""

    pass


class SpotifyAuthenticationError(SpotifyClientError):
    """Token missing, expired or revoked (HTTP 401).

    Raised when the OAuth flow has not been completed or the refresh failed.
    """

    pass


class SpotifyAuthorizationError(SpotifyClientError):
    """Request forbidden (HTTP 403).

    Raised when the token lacks a scope or the account is not Premium.
    """

    pass


class SpotifyNotFoundError(SpotifyClientError):
    """Requested resource not found (HTTP 404).

    Also returned by the player endpoints when no active device exists.
    """

    pass


class SpotifyRateLimitError(SpotifyClientError):
    """Too many requests (HTTP 429).

    Attributes:
        retry_after: Seconds Spotify asked the client to wait, if provided
    """

    def __init__(self, status: Optional[int], message: str, retry_after: Optional[int] = None):
        super().__init__(status, message)
        self.retry_after = retry_after


class SpotifyConnectionError(SpotifyClientError):
    """Spotify could not be reached (connection failure or timeout)."""

    def __init__(self, message: str):
        super().__init__(None, message)
