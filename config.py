import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5001'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'


    MOVIES_SOURCE_URL = os.getenv(
        'MOVIES_SOURCE_URL',
        'https://gist.githubusercontent.com/saniyusuf/406b843afdfb9c6a86e25753fe2761f4'
        '/raw/523c324c7fcc36efab8224f9ebb7556c09b69a14/Film.JSON'
    )
    MOVIES_CACHE_TTL_SECONDS = int(os.getenv('MOVIES_CACHE_TTL_SECONDS', '3600'))
    MOVIES_FETCH_TIMEOUT = float(os.getenv('MOVIES_FETCH_TIMEOUT', '10'))


    JWT_SECRET = os.getenv('JWT_SECRET', 'your_super_secret_key_change_me_in_production')
    JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
    JWT_EXPIRY_SECONDS = int(os.getenv('JWT_EXPIRY_SECONDS', '3600'))


    AUTH_USERNAME = os.getenv('AUTH_USERNAME', 'admin')
    AUTH_PASSWORD = os.getenv('AUTH_PASSWORD', '1234')


    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')


    API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:5001/api')
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', '10'))
    CLIENT_STORAGE_PATH = os.getenv(
        'CLIENT_STORAGE_PATH',
        os.path.join(os.path.expanduser('~'), '.movie_app', 'storage.json')
    )
