import os
import sys
import time

import jwt
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from errors import InvalidCredentials, InvalidToken
from services.credentials import CredentialVerifier, StaticCredentialVerifier
from services.token_service import TokenService

SECRET = 'test-secret-for-movie-app-token-tests'


def test_issue_then_verify_returns_username():
    service = TokenService(SECRET)

    token = service.issue('admin')

    assert service.verify(token) == {'username': 'admin'}


def test_token_expires_after_one_hour():
    now = [time.time()]
    service = TokenService(SECRET, clock=lambda: now[0])

    token = service.issue('admin')
    payload = jwt.decode(token, SECRET, algorithms=['HS256'])
    assert payload['exp'] - payload['iat'] == 3600

    now[0] += 3599
    assert service.verify(token) == {'username': 'admin'}

    now[0] += 1
    with pytest.raises(InvalidToken) as exc_info:
        service.verify(token)
    assert exc_info.value.reason == 'expired'


def test_wrong_secret_is_rejected():
    token = TokenService('another-secret-for-movie-app-token-tests').issue('admin')

    with pytest.raises(InvalidToken) as exc_info:
        TokenService(SECRET).verify(token)
    assert exc_info.value.reason == 'signature'


@pytest.mark.parametrize('token', ['', 'not-a-jwt', 'a.b.c', None])
def test_malformed_tokens_are_rejected(token):
    with pytest.raises(InvalidToken):
        TokenService(SECRET).verify(token)


def test_token_without_username_is_rejected():
    token = jwt.encode({'exp': int(time.time()) + 60}, SECRET, algorithm='HS256')

    with pytest.raises(InvalidToken) as exc_info:
        TokenService(SECRET).verify(token)
    assert exc_info.value.reason == 'malformed'


def test_token_without_expiry_is_rejected():
    token = jwt.encode({'username': 'admin'}, SECRET, algorithm='HS256')

    with pytest.raises(InvalidToken):
        TokenService(SECRET).verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService('')


def test_static_verifier_accepts_exact_match():
    verifier = StaticCredentialVerifier('admin', '1234')

    assert verifier.verify('admin', '1234') == {'username': 'admin'}


@pytest.mark.parametrize('username,password', [
    ('admin', 'wrong'),
    ('Admin', '1234'),
    ('admin', '1234 '),
    (None, '1234'),
    ('admin', None),
    ('', ''),
])
def test_static_verifier_rejects_mismatch(username, password):
    verifier = StaticCredentialVerifier('admin', '1234')

    with pytest.raises(InvalidCredentials):
        verifier.verify(username, password)


def test_credential_verifier_is_abstract():
    with pytest.raises(TypeError):
        CredentialVerifier()


def test_custom_verifier_plugs_into_login():
    from app import create_app

    class DirectoryVerifier(CredentialVerifier):
        def verify(self, username, password):
            if (username, password) != ('alice', 's3cret'):
                raise InvalidCredentials()
            return {'username': username}

    client = create_app(credential_verifier=DirectoryVerifier()).test_client()

    assert client.post('/api/login', json={'username': 'alice', 'password': 's3cret'}).status_code == 200
    assert client.post('/api/login', json={'username': 'admin', 'password': '1234'}).status_code == 401
