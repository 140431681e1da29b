"""JWT issuance and verification"""
import logging
import time

import jwt

from errors import InvalidToken

logger = logging.getLogger(__name__)


class TokenService:
    def __init__(self, secret, algorithm='HS256', expiry_seconds=3600, clock=time.time):
        if not secret:
            raise ValueError("JWT secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.expiry_seconds = expiry_seconds
        self.clock = clock

    def issue(self, username):
        """
        Sign a token for username

        Returns:
            str: encoded JWT expiring expiry_seconds after issuance
        """
        now = int(self.clock())
        payload = {
            'username': username,
            'iat': now,
            'exp': now + self.expiry_seconds
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token):
        """
        Decode and check a token

        Returns:
            dict: {'username': ...}

        Raises:
            InvalidToken: bad signature, malformed payload or expired
        """
        if not isinstance(token, str) or not token:
            raise InvalidToken(reason='malformed')

        try:
            # Expiry is checked below against our own clock
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'verify_exp': False, 'verify_iat': False, 'require': ['exp']}
            )
        except jwt.InvalidSignatureError as e:
            logger.warning(f"JWT verification error: {e}")
            raise InvalidToken(reason='signature') from e
        except jwt.InvalidTokenError as e:
            logger.warning(f"JWT verification error: {e}")
            raise InvalidToken(reason='malformed') from e

        exp = payload.get('exp')
        if not isinstance(exp, (int, float)) or self.clock() >= exp:
            logger.warning("JWT verification error: token expired")
            raise InvalidToken(reason='expired')

        username = payload.get('username')
        if not isinstance(username, str) or not username:
            logger.warning("JWT verification error: payload has no username")
            raise InvalidToken(reason='malformed')

        return {'username': username}
