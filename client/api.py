import logging

import requests

from errors import ApiError, Forbidden, InvalidCredentials, Unauthenticated

logger = logging.getLogger(__name__)


class MovieApiClient:
    """HTTP client for the movie backend; attaches the session token"""

    def __init__(self, base_url, session, http=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session
        self.http = http or requests.Session()
        self.timeout = timeout

    def _headers(self):
        token = self.session.token
        if token:
            return {'Authorization': f'Bearer {token}'}
        return {}

    def _request(self, method, path, **kwargs):
        try:
            return self.http.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(f"Could not reach the movie server: {e}") from e

    @staticmethod
    def _json(response, error_message):
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{error_message}: {e}")
            raise ApiError(error_message) from e

    @staticmethod
    def _message(response, fallback):
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict) and body.get('message'):
            return body['message']
        return fallback

    def login(self, username, password):
        response = self._request('POST', '/login', json={'username': username, 'password': password})

        if response.status_code == 401:
            raise InvalidCredentials(self._message(response, 'Invalid credentials'))
        if response.status_code != 200:
            raise ApiError(self._message(response, 'Login failed'), response.status_code)

        body = self._json(response, 'Unexpected login response')
        token = body.get('token') if isinstance(body, dict) else None
        if not token or not isinstance(token, str):
            raise ApiError('Login response did not contain a token')

        self.session.login(token)
        return token

    def search(self, query=None, sort_by=None, sort_order='asc'):
        params = {'sortOrder': sort_order or 'asc'}
        if query:
            params['query'] = query
        if sort_by:
            params['sortBy'] = sort_by

        response = self._request('GET', '/movies/search', params=params)

        if response.status_code == 401:
            raise Unauthenticated('Please log in first')
        if response.status_code == 403:
            raise Forbidden('Session expired, please log in again')
        if response.status_code != 200:
            raise ApiError(self._message(response, 'Failed to fetch movies'), response.status_code)

        results = self._json(response, 'Unexpected search response')
        if not isinstance(results, list):
            raise ApiError('Unexpected search response')
        return results
