# Same shape as the upstream Film.JSON document
SAMPLE_MOVIES = [
    {
        'Title': 'The Matrix',
        'Year': '1999',
        'Rated': 'R',
        'Genre': 'Action, Sci-Fi',
        'Director': 'Lana Wachowski, Lilly Wachowski',
        'Poster': 'https://example.com/posters/matrix.jpg',
        'imdbID': 'tt0133093',
        'Type': 'movie'
    },
    {
        'Title': 'Inception',
        'Year': '2010',
        'Rated': 'PG-13',
        'Genre': 'Action, Adventure, Sci-Fi',
        'Director': 'Christopher Nolan',
        'Poster': 'https://example.com/posters/inception.jpg',
        'imdbID': 'tt1375666',
        'Type': 'movie'
    },
    {
        'Title': 'The Matrix Reloaded',
        'Year': '2003',
        'Rated': 'R',
        'Genre': 'Action, Sci-Fi',
        'Director': 'Lana Wachowski, Lilly Wachowski',
        'Poster': 'N/A',
        'imdbID': 'tt0234215',
        'Type': 'movie'
    },
    {
        'Title': 'Game of Thrones',
        'Year': '2011–2019',
        'Rated': 'TV-MA',
        'Genre': 'Action, Adventure, Drama',
        'Poster': 'https://example.com/posters/got.jpg',
        'imdbID': 'tt0944947',
        'Type': 'series'
    },
    {
        'Title': 'avatar',
        'Year': '2009',
        'Genre': 'Action, Adventure, Fantasy',
        'Poster': 'https://example.com/posters/avatar.jpg',
        'imdbID': 'tt0499549',
        'Type': 'movie'
    },
    {
        'Title': 'Interstellar',
        'Year': 'unknown',
        'Poster': 'https://example.com/posters/interstellar.jpg',
        'imdbID': 'tt0816692',
        'Type': 'movie'
    },
    {
        'Year': '1994',
        'Poster': 'N/A'
    }
]
