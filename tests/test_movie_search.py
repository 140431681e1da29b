import copy
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.sample_movies import SAMPLE_MOVIES
from services.movie_search import apply, year_key


def titles(movies):
    return [m.get('Title') for m in movies]


def test_query_filters_case_insensitively():
    results = apply(SAMPLE_MOVIES, 'MATRIX')

    assert titles(results) == ['The Matrix', 'The Matrix Reloaded']


def test_query_excludes_everything_else():
    for query in ['matrix', 'a', 'in', 'zzz', 'The']:
        results = apply(SAMPLE_MOVIES, query)
        for movie in SAMPLE_MOVIES:
            title = movie.get('Title')
            expected = bool(title) and query.lower() in title.lower()
            assert (movie in results) == expected


def test_movie_without_title_never_matches():
    results = apply(SAMPLE_MOVIES, '1994')

    assert results == []


def test_no_query_returns_everything_in_order():
    assert apply(SAMPLE_MOVIES) == SAMPLE_MOVIES
    assert apply(SAMPLE_MOVIES, '') == SAMPLE_MOVIES


def test_apply_does_not_mutate_input():
    original = copy.deepcopy(SAMPLE_MOVIES)

    apply(SAMPLE_MOVIES, 'a', 'year', 'desc')
    apply(SAMPLE_MOVIES, None, 'title')

    assert SAMPLE_MOVIES == original


def test_apply_is_deterministic():
    first = apply(SAMPLE_MOVIES, 'a', 'title', 'desc')
    second = apply(SAMPLE_MOVIES, 'a', 'title', 'desc')

    assert first == second


def test_sort_by_title_ignores_case():
    results = apply(SAMPLE_MOVIES, None, 'title', 'asc')

    assert titles(results) == [
        None,
        'avatar',
        'Game of Thrones',
        'Inception',
        'Interstellar',
        'The Matrix',
        'The Matrix Reloaded'
    ]


def test_sort_by_year_puts_unparseable_first():
    results = apply(SAMPLE_MOVIES, 'in', 'year', 'asc')

    assert titles(results) == ['Interstellar', 'Inception']


def test_sort_by_year_descending():
    results = apply(SAMPLE_MOVIES, 'matrix', 'year', 'desc')

    assert titles(results) == ['The Matrix Reloaded', 'The Matrix']


def test_year_key_parses_leading_digits():
    assert year_key({'Year': '2011–2019'}) == 2011
    assert year_key({'Year': ' 1999'}) == 1999
    assert year_key({'Year': 'N/A'}) == 0
    assert year_key({'Year': ''}) == 0
    assert year_key({}) == 0
    assert year_key({'Year': 2004}) == 2004


def test_sort_is_stable_in_both_directions():
    movies = [
        {'Title': 'A', 'Year': '2000', 'imdbID': '1'},
        {'Title': 'B', 'Year': 'bad', 'imdbID': '2'},
        {'Title': 'C', 'Year': '2000', 'imdbID': '3'},
        {'Title': 'D', 'imdbID': '4'},
    ]

    asc = apply(movies, None, 'year', 'asc')
    desc = apply(movies, None, 'year', 'desc')

    assert [m['imdbID'] for m in asc] == ['2', '4', '1', '3']
    assert [m['imdbID'] for m in desc] == ['1', '3', '2', '4']


def test_unknown_sort_field_keeps_order():
    results = apply(SAMPLE_MOVIES, None, 'rating', 'desc')

    assert results == SAMPLE_MOVIES


def test_any_order_other_than_asc_descends():
    asc = apply(SAMPLE_MOVIES, 'matrix', 'title', 'asc')
    default = apply(SAMPLE_MOVIES, 'matrix', 'title', None)

    assert titles(asc) == ['The Matrix', 'The Matrix Reloaded']
    assert titles(default) == ['The Matrix', 'The Matrix Reloaded']

    for order in ['ASC', 'Asc', 'sideways', 'desc']:
        results = apply(SAMPLE_MOVIES, 'matrix', 'title', order)
        assert titles(results) == ['The Matrix Reloaded', 'The Matrix']


def test_year_key_ignores_non_ascii_digits():
    assert year_key({'Year': '١٩٩٩'}) == 0
    assert year_key({'Year': '１９９９'}) == 0


def test_non_dict_records_are_skipped_by_filter():
    movies = [{'Title': 'Heat', 'Year': '1995'}, 'garbage', 42]

    assert apply(movies, 'heat') == [{'Title': 'Heat', 'Year': '1995'}]
    assert apply(movies, None, 'year')[-1] == {'Title': 'Heat', 'Year': '1995'}
