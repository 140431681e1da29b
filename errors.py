"""Exceptions shared by the movie backend and client"""

from typing import Optional


class MovieAppError(Exception):
    """Base exception for the movie app"""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(MovieAppError):
    """No credential material presented"""

    status_code = 401
    default_message = 'Authorization header missing'


class Forbidden(MovieAppError):
    """Credential material present but invalid or expired"""

    status_code = 403
    default_message = 'Invalid or expired token'


class InvalidCredentials(MovieAppError):
    """Username/password did not match"""

    status_code = 401
    default_message = 'Invalid credentials'


class InvalidToken(MovieAppError):
    """Token signature, payload or expiry check failed"""

    status_code = 403
    default_message = 'Invalid token'

    def __init__(self, message: Optional[str] = None, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(message)


class UpstreamFetchFailure(MovieAppError):
    """Network or transport error while fetching the movie list"""

    default_message = 'Error fetching or processing movie data'


class InvalidUpstreamFormat(MovieAppError):
    """Upstream returned something other than a JSON array"""

    default_message = 'Invalid data format received from movie source'


class PersistenceFailure(MovieAppError):
    """Local storage write failed"""

    default_message = 'Could not save to local storage'


class ApiError(MovieAppError):
    """Unexpected response from the movie API"""

    default_message = 'Movie API request failed'

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)
