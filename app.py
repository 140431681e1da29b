from flask import Blueprint, Flask, current_app, g, jsonify, request
from flask_cors import CORS
from config import Config
import logging

from errors import InvalidCredentials, MovieAppError
from database.movie_cache import MovieCache
from services.credentials import StaticCredentialVerifier
from services.token_service import TokenService
from services.request_gate import require_token
from services import movie_search

from metrics import (
    metrics_endpoint, track_request,
    LOGIN_COUNT, SEARCH_RESULTS_COUNT
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


api = Blueprint('api', __name__)


@api.route('/')
@track_request
def home():
    return 'Movie App Backend is Running!'


@api.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-app-backend',
        'version': '1.0.0'
    }), 200


@api.route('/api/login', methods=['POST'])
@track_request
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    username = data.get('username')
    password = data.get('password')

    logger.info(f"Login attempt: User='{username}'")

    try:
        identity = current_app.extensions['credential_verifier'].verify(username, password)
    except InvalidCredentials:
        LOGIN_COUNT.labels(outcome='failure').inc()
        logger.info(f"Login failed for '{username}'")
        raise

    token = current_app.extensions['token_service'].issue(identity['username'])
    LOGIN_COUNT.labels(outcome='success').inc()
    logger.info(f"Login successful for '{username}', token generated")

    return jsonify({'token': token})


@api.route('/api/movies/search')
@track_request
@require_token
def search():
    query = request.args.get('query', '')
    sort_by = request.args.get('sortBy', '')
    sort_order = request.args.get('sortOrder') or 'asc'

    logger.info(
        f"Search request by '{g.auth['username']}': query='{query}', "
        f"sortBy='{sort_by}', sortOrder='{sort_order}'"
    )

    try:
        movies = current_app.extensions['movie_cache'].get()
        results = movie_search.apply(movies, query, sort_by, sort_order)
    except MovieAppError as e:
        logger.error(f"Error during movie search: {e}")
        raise
    except Exception as e:
        logger.exception(f"Error during movie search: {e}")
        return jsonify({'message': 'Error fetching or processing movie data'}), 500

    SEARCH_RESULTS_COUNT.observe(len(results))

    return jsonify(results)


@api.route('/api/cache/stats')
@track_request
@require_token
def cache_stats():
    return jsonify(current_app.extensions['movie_cache'].stats())


@api.route('/metrics')
def metrics():
    return metrics_endpoint()


def handle_app_error(e):
    return jsonify({'message': e.message}), e.status_code


def create_app(config=Config, movie_cache=None, credential_verifier=None, token_service=None):
    app = Flask(__name__)
    app.config.from_object(config)

    CORS(app, resources={r'/api/*': {'origins': config.CORS_ORIGINS}})

    if movie_cache is None:
        movie_cache = MovieCache(
            config.MOVIES_SOURCE_URL,
            ttl_seconds=config.MOVIES_CACHE_TTL_SECONDS,
            timeout=config.MOVIES_FETCH_TIMEOUT
        )
    if credential_verifier is None:
        credential_verifier = StaticCredentialVerifier(config.AUTH_USERNAME, config.AUTH_PASSWORD)
    if token_service is None:
        token_service = TokenService(
            config.JWT_SECRET,
            algorithm=config.JWT_ALGORITHM,
            expiry_seconds=config.JWT_EXPIRY_SECONDS
        )

    app.extensions['movie_cache'] = movie_cache
    app.extensions['credential_verifier'] = credential_verifier
    app.extensions['token_service'] = token_service

    app.register_blueprint(api)
    app.register_error_handler(MovieAppError, handle_app_error)

    return app


if __name__ == '__main__':
    app = create_app()
    app.extensions['movie_cache'].warm()
    logger.info(f"Server listening on port {Config.FLASK_PORT}")
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
