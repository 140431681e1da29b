"""Credential verification for the login endpoint"""
import hmac
import logging
from abc import ABC, abstractmethod

from errors import InvalidCredentials

logger = logging.getLogger(__name__)


class CredentialVerifier(ABC):
    """Base interface for login checks"""

    @abstractmethod
    def verify(self, username, password):
        """
        Check a username/password pair

        Returns:
            dict: identity, {'username': ...}

        Raises:
            InvalidCredentials: pair does not match
        """


class StaticCredentialVerifier(CredentialVerifier):
    """Single hardcoded user. Plain-text comparison, no hashing."""

    def __init__(self, username, password):
        self.username = username
        self.password = password

    def verify(self, username, password):
        if not isinstance(username, str) or not isinstance(password, str):
            raise InvalidCredentials()

        user_ok = hmac.compare_digest(username.encode('utf-8'), self.username.encode('utf-8'))
        password_ok = hmac.compare_digest(password.encode('utf-8'), self.password.encode('utf-8'))

        if not (user_ok and password_ok):
            logger.info(f"Credential mismatch for '{username}'")
            raise InvalidCredentials()

        return {'username': self.username}
