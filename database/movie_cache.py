"""In-memory cache of the upstream movie list"""
import logging
import threading
import time

import requests

from errors import InvalidUpstreamFormat, UpstreamFetchFailure
from metrics import (
    CACHE_HIT_COUNT, CACHE_MISS_COUNT,
    CACHE_STALE_COUNT, UPSTREAM_FETCH_ERRORS
)

logger = logging.getLogger(__name__)


class MovieCache:
    """
    Single snapshot of the movie list with a freshness window.

    One instance per app. The snapshot is replaced by plain attribute
    assignment, so concurrent readers see either the old or the new list;
    refreshes are not serialized. Hit/miss counters are guarded by a lock
    because the dev server handles requests on several threads.
    """

    def __init__(self, source_url, ttl_seconds=3600, timeout=10, session=None, clock=time.time):
        self.source_url = source_url
        self.ttl_seconds = ttl_seconds
        self.timeout = timeout
        self.session = session or requests.Session()
        self.clock = clock

        self._movies = None
        self._fetched_at = 0.0

        self.hits = 0
        self.misses = 0
        self.stale_serves = 0
        self._stats_lock = threading.Lock()

    def _count(self, name):
        with self._stats_lock:
            setattr(self, name, getattr(self, name) + 1)

    def is_fresh(self, now=None):
        if self._movies is None:
            return False
        now = self.clock() if now is None else now
        return now - self._fetched_at < self.ttl_seconds

    def get(self):
        """
        Return the movie list, refreshing it when the window has elapsed

        Returns:
            list: movie dicts

        Raises:
            InvalidUpstreamFormat: upstream body is not a JSON array
            UpstreamFetchFailure: fetch failed and nothing is cached
        """
        now = self.clock()
        if self.is_fresh(now):
            self._count('hits')
            CACHE_HIT_COUNT.inc()
            logger.info("Serving movies from cache")
            return self._movies

        self._count('misses')
        CACHE_MISS_COUNT.inc()

        try:
            movies = self._fetch()
        except UpstreamFetchFailure:
            if self._movies is not None:
                self._count('stale_serves')
                CACHE_STALE_COUNT.inc()
                logger.warning("Returning potentially stale cache due to fetch error")
                return self._movies
            raise

        if not movies and self._movies:
            logger.warning("Upstream returned an empty list, keeping previous snapshot")
            return self._movies

        self._movies = movies
        self._fetched_at = now
        logger.info(f"Fetched and cached {len(movies)} movies")
        return movies

    def _fetch(self):
        logger.info(f"Fetching movies from {self.source_url}")

        try:
            response = self.session.get(self.source_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            UPSTREAM_FETCH_ERRORS.labels(reason='transport').inc()
            logger.error(f"Error fetching movie data: {e}")
            raise UpstreamFetchFailure() from e

        try:
            data = response.json()
        except ValueError as e:
            UPSTREAM_FETCH_ERRORS.labels(reason='format').inc()
            logger.error(f"Fetched data is not valid JSON: {e}")
            raise InvalidUpstreamFormat() from e

        if not isinstance(data, list):
            UPSTREAM_FETCH_ERRORS.labels(reason='format').inc()
            logger.error(f"Fetched data is not an array: {type(data).__name__}")
            raise InvalidUpstreamFormat()

        return data

    def warm(self):
        """Prefetch at startup; failures are only logged"""
        try:
            self.get()
            return True
        except (UpstreamFetchFailure, InvalidUpstreamFormat) as e:
            logger.warning(f"Cache warm-up failed: {e}")
            return False

    def clear(self):
        count = len(self._movies) if self._movies is not None else 0
        self._movies = None
        self._fetched_at = 0.0
        return count

    def stats(self):
        with self._stats_lock:
            hits, misses, stale_serves = self.hits, self.misses, self.stale_serves

        total = hits + misses
        hit_rate = (hits / total * 100) if total > 0 else 0

        movies = self._movies
        age = None
        if movies is not None:
            age = round(self.clock() - self._fetched_at, 1)

        return {
            'cached_movies': len(movies) if movies is not None else 0,
            'age_seconds': age,
            'ttl_seconds': self.ttl_seconds,
            'hits': hits,
            'misses': misses,
            'stale_serves': stale_serves,
            'hit_rate': f"{hit_rate:.1f}%"
        }
