"""Filtering and sorting over the cached movie list"""
import logging
import re

logger = logging.getLogger(__name__)

SORT_FIELDS = ('title', 'year')

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def title_key(movie):
    title = movie.get('Title') if isinstance(movie, dict) else None
    return title.casefold() if isinstance(title, str) else ''


def year_key(movie):
    """Leading integer of Year, 0 when missing or unparseable"""
    year = movie.get('Year') if isinstance(movie, dict) else None
    if year is None or isinstance(year, bool):
        return 0
    match = _LEADING_INT.match(str(year))
    return int(match.group(1)) if match else 0


_SORT_KEYS = {
    'title': title_key,
    'year': year_key
}


def matches_query(movie, query):
    title = movie.get('Title') if isinstance(movie, dict) else None
    if not isinstance(title, str) or not title:
        return False
    return query.casefold() in title.casefold()


def apply(collection, query=None, sort_by=None, sort_order='asc'):
    """
    Filter by title substring, then sort

    Args:
        collection: list of movie dicts
        query: case-insensitive title substring; empty/None keeps everything
        sort_by: 'title' or 'year'; anything else keeps input order
        sort_order: exactly 'asc' ascends, any other value (including 'ASC') descends

    Returns:
        list: new list, input is left untouched
    """
    if query:
        results = [movie for movie in collection if matches_query(movie, query)]
        logger.info(f"Found {len(results)} movies matching query '{query}'")
    else:
        results = list(collection)

    key = _SORT_KEYS.get(sort_by)
    if key is not None:
        descending = (sort_order or 'asc') != 'asc'
        logger.info(f"Sorting by '{sort_by}' in '{'desc' if descending else 'asc'}' order")
        # sorted() is stable for reverse=True as well
        results = sorted(results, key=key, reverse=descending)

    return results
