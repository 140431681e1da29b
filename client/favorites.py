import json
import logging

from errors import PersistenceFailure

logger = logging.getLogger(__name__)

FAVORITES_KEY = 'favorites'

FAVORITE_FIELDS = ('Title', 'Year', 'Poster', 'imdbID')


def movie_identity(movie):
    return movie.get('Title'), movie.get('Year')


def load_favorites(storage):
    """Read the stored list; unreadable data is dropped from storage"""
    raw = storage.get_item(FAVORITES_KEY)
    if not raw:
        return []

    try:
        items = json.loads(raw)
    except ValueError as e:
        logger.error(f"Error reading favorites from storage: {e}")
        _discard(storage)
        return []

    if not isinstance(items, list):
        logger.error("Stored favorites are not a list, discarding them")
        _discard(storage)
        return []

    return [item for item in items if isinstance(item, dict)]


def _discard(storage):
    try:
        storage.remove_item(FAVORITES_KEY)
    except PersistenceFailure as e:
        logger.error(f"Could not discard corrupt favorites: {e}")


class FavoritesStore:
    """Client-side favorites, unique by (Title, Year), kept in insertion order"""

    def __init__(self, storage):
        self.storage = storage
        self._favorites = load_favorites(storage)
        self._unsubscribe = storage.subscribe(self._on_storage_change)

    def _on_storage_change(self, event):
        if event.key == FAVORITES_KEY:
            self.reload()

    def reload(self):
        self._favorites = load_favorites(self.storage)

    def list(self):
        self.reload()
        return [dict(item) for item in self._favorites]

    def contains(self, movie):
        identity = movie_identity(movie)
        return any(movie_identity(fav) == identity for fav in self._favorites)

    def toggle(self, movie):
        """
        Add the movie if absent, remove it if present

        Returns:
            bool: True if the movie is a favorite afterwards, None if rejected

        Raises:
            PersistenceFailure: storage write failed, nothing changed
        """
        if not isinstance(movie, dict) or not movie.get('Title') or not movie.get('Year'):
            logger.warning(f"Attempted to toggle favorite for invalid movie object: {movie!r}")
            return None

        # Same-handle writes (e.g. logout) raise no event, so start from storage
        self.reload()
        previous = self._favorites
        identity = movie_identity(movie)

        if self.contains(movie):
            updated = [fav for fav in previous if movie_identity(fav) != identity]
        else:
            updated = previous + [{field: movie.get(field) for field in FAVORITE_FIELDS}]

        self._favorites = updated
        try:
            self.storage.set_item(FAVORITES_KEY, json.dumps(updated))
        except PersistenceFailure as e:
            logger.error(f"Error writing favorites to storage: {e}")
            self._favorites = previous
            raise

        return len(updated) > len(previous)

    def close(self):
        self._unsubscribe()
