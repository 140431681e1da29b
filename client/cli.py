#!/usr/bin/env python3
"""Command-line frontend for the movie search backend"""
import argparse
import logging
import sys

from config import Config
from errors import Forbidden, MovieAppError, Unauthenticated
from client.api import MovieApiClient
from client.favorites import FavoritesStore
from client.session import ClientSession
from client.storage import StorageArea

logger = logging.getLogger(__name__)

NO_POSTER = 'N/A'


def build_parser():
    parser = argparse.ArgumentParser(
        prog='movie-app',
        description='Search movies and keep a local favorites list'
    )
    parser.add_argument('--api-url', default=Config.API_BASE_URL, help='backend API base URL')
    parser.add_argument('--storage', default=Config.CLIENT_STORAGE_PATH, help='local storage file')
    parser.add_argument('-v', '--verbose', action='store_true', help='show debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    login = subparsers.add_parser('login', help='log in and store the token')
    login.add_argument('-u', '--username', required=True)
    login.add_argument('-p', '--password', required=True)

    subparsers.add_parser('logout', help='forget the token and favorites')

    search = subparsers.add_parser('search', help='search movies by title')
    search.add_argument('query', nargs='?', default='')
    search.add_argument('--sort-by', choices=['title', 'year'], default='')
    search.add_argument('--order', choices=['asc', 'desc'], default='asc')
    search.add_argument('--favorite', type=int, metavar='N', action='append', default=[],
                        help='toggle result number N as favorite')

    subparsers.add_parser('favorites', help='list favorites')

    favorite = subparsers.add_parser('favorite', help='toggle a movie as favorite')
    favorite.add_argument('title')
    favorite.add_argument('year')
    favorite.add_argument('--poster', default=NO_POSTER)
    favorite.add_argument('--imdb-id', default=None)

    return parser


def format_movie(index, movie, is_favorite):
    marker = '*' if is_favorite else ' '
    title = movie.get('Title') or 'Untitled'
    year = movie.get('Year') or 'N/A'
    line = f"{marker} {index:>3}. {title} ({year})"
    if movie.get('imdbID'):
        line += f" [{movie['imdbID']}]"
    return line


def print_movies(movies, favorites, out):
    for i, movie in enumerate(movies, start=1):
        print(format_movie(i, movie, favorites.contains(movie)), file=out)


def cmd_login(args, ctx, out):
    ctx['api'].login(args.username, args.password)
    print(f"Logged in as {args.username}", file=out)
    return 0


def cmd_logout(args, ctx, out):
    ctx['session'].logout()
    print("Logged out", file=out)
    return 0


def cmd_search(args, ctx, out):
    if not ctx['session'].is_authenticated:
        raise Unauthenticated('Please log in first')

    if not args.query and not args.sort_by:
        print("Enter a search term or a sort field", file=out)
        return 0

    try:
        movies = ctx['api'].search(args.query, args.sort_by, args.order)
    except Forbidden:
        ctx['session'].logout()
        raise

    if not movies:
        if args.query:
            print(f'No movies found matching "{args.query}".', file=out)
        return 0

    favorites = ctx['favorites']
    for number in args.favorite:
        if not 1 <= number <= len(movies):
            print(f"No result number {number}", file=out)
            continue
        favorites.toggle(movies[number - 1])

    print_movies(movies, favorites, out)
    return 0


def cmd_favorites(args, ctx, out):
    favorites = ctx['favorites'].list()
    if not favorites:
        print("You haven't added any favorites yet.", file=out)
        return 0
    print_movies(favorites, ctx['favorites'], out)
    return 0


def cmd_favorite(args, ctx, out):
    movie = {'Title': args.title, 'Year': args.year, 'Poster': args.poster, 'imdbID': args.imdb_id}
    added = ctx['favorites'].toggle(movie)
    if added is None:
        print("Title and year are required", file=out)
        return 1
    action = 'Added' if added else 'Removed'
    print(f"{action} {args.title} ({args.year})", file=out)
    return 0


COMMANDS = {
    'login': cmd_login,
    'logout': cmd_logout,
    'search': cmd_search,
    'favorites': cmd_favorites,
    'favorite': cmd_favorite
}


def main(argv=None, storage_area=None, http=None, out=None, err=None):
    out = out or sys.stdout
    err = err or sys.stderr

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    area = storage_area or StorageArea(args.storage)
    storage = area.open()
    session = ClientSession(storage)
    ctx = {
        'session': session,
        'favorites': FavoritesStore(storage),
        'api': MovieApiClient(args.api_url, session, http=http, timeout=Config.API_TIMEOUT)
    }

    try:
        return COMMANDS[args.command](args, ctx, out)
    except MovieAppError as e:
        print(f"Error: {e.message}", file=err)
        return 1
    finally:
        ctx['favorites'].close()
        session.close()
        storage.close()


if __name__ == '__main__':
    sys.exit(main())
