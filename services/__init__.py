from .credentials import CredentialVerifier, StaticCredentialVerifier
from .token_service import TokenService
from .request_gate import authenticate_header, require_token
from .movie_search import apply as search_movies

__all__ = [
    'CredentialVerifier',
    'StaticCredentialVerifier',
    'TokenService',
    'authenticate_header',
    'require_token',
    'search_movies'
]
