import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config


def test_config_defaults():
    assert Config.FLASK_HOST == '0.0.0.0'
    assert Config.FLASK_PORT == 5001
    assert Config.FLASK_DEBUG is False


def test_config_movie_source():
    assert Config.MOVIES_SOURCE_URL.startswith('https://')
    assert Config.MOVIES_CACHE_TTL_SECONDS == 3600
    assert Config.MOVIES_FETCH_TIMEOUT > 0


def test_config_auth():
    assert Config.AUTH_USERNAME == 'admin'
    assert Config.AUTH_PASSWORD == '1234'
    assert Config.JWT_SECRET
    assert Config.JWT_ALGORITHM == 'HS256'
    assert Config.JWT_EXPIRY_SECONDS == 3600


def test_config_client():
    assert hasattr(Config, 'API_BASE_URL')
    assert hasattr(Config, 'CLIENT_STORAGE_PATH')
    assert Config.API_BASE_URL.endswith('/api')
