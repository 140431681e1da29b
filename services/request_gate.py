import functools
import logging

from flask import current_app, g, request

from errors import Forbidden, InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)


def authenticate_header(header_value, token_service):
    """
    Resolve an Authorization header to an identity

    Raises:
        Unauthenticated: header absent
        Forbidden: token rejected by the token service
    """
    if header_value is None:
        logger.info("Authorization header missing")
        raise Unauthenticated()

    # "Bearer <token>": everything after the scheme is the token
    parts = header_value.split(' ', 1)
    token = parts[1].strip() if len(parts) > 1 else ''

    try:
        return token_service.verify(token)
    except InvalidToken as e:
        raise Forbidden() from e


def require_token(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        token_service = current_app.extensions['token_service']
        g.auth = authenticate_header(request.headers.get('Authorization'), token_service)
        return f(*args, **kwargs)

    return wrapper
