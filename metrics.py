from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'movie_app_request_count',
    'Total Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movie_app_request_duration_seconds',
    'Request Duration',
    ['method', 'endpoint']
)


CACHE_HIT_COUNT = Counter(
    'movie_app_cache_hits_total',
    'Movie list served from a fresh snapshot'
)

CACHE_MISS_COUNT = Counter(
    'movie_app_cache_misses_total',
    'Movie list requests that went upstream'
)

CACHE_STALE_COUNT = Counter(
    'movie_app_cache_stale_total',
    'Stale snapshot served after an upstream failure'
)

UPSTREAM_FETCH_ERRORS = Counter(
    'movie_app_upstream_fetch_errors_total',
    'Failed upstream movie list fetches',
    ['reason']
)


LOGIN_COUNT = Counter(
    'movie_app_logins_total',
    'Login attempts',
    ['outcome']
)

SEARCH_RESULTS_COUNT = Histogram(
    'movie_app_search_results',
    'Number of search results returned'
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        status_code = 500

        try:
            response = f(*args, **kwargs)
            if isinstance(response, tuple):
                status_code = response[1]
            else:
                status_code = getattr(response, 'status_code', 200)
            return response
        except Exception as e:
            status_code = getattr(e, 'status_code', 500)
            raise
        finally:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()

            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(time.time() - start_time)

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
