# movierec

A small movie recommender. Each movie has a vector of feature scores. Each
user has ratings for some of the movies. The package suggests a movie the
user has not rated, in one of two ways:

- **by content**: it builds a preference vector from the user's ratings,
  each centred on the user's average rating. It then picks the unrated movie
  whose features have the highest cosine similarity to that vector.
- **by collaborative filtering**: it predicts a rating for every unrated
  movie from the `k` rated movies whose features are most similar to it.
  It then picks the movie with the highest prediction.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Input files

**Movies file.** There is one movie per line. The line starts with the name
and the year joined by `-`, followed by feature scores between 1 and 10:

```
Titanic-1997 7 2 9 1
Batman-2022 2 8 6 5
```

- The name is everything before the first `-`, so it cannot itself contain
  a `-`.
- Blank lines are skipped.
- Reading the features stops at the first token that is not a number.
- A line with the same name and year as an earlier one replaces that
  line's features.

**Users file.**

- The first line lists the movies as `Name-Year`, separated by whitespace.
- Every following line holds a user name and then one rating per listed
  movie, in the same order.
- A rating is between 1 and 10, or `NA` for a movie the user has not rated.
- Blank lines are skipped.

```
Titanic-1997 Batman-2022 StarWars-1977
Sofia 8 NA 6
Omar NA 7 9
```

`movierec.loaders.LoaderError` (a `RuntimeError`) is raised when:

- a file cannot be read;
- a score lies outside 1–10;
- an entry has no year after the `-`;
- a user's rating is not a number;
- a user has more ratings than there are listed movies.

## Library use

```python
from movierec.loaders import load_recommendation_system, load_users

system = load_recommendation_system("movies.txt")
users = load_users("users.txt", system)

user = users[0]
print(user.get_recommendation_by_content())
print(user.get_recommendation_by_cf(2))
print(user.get_prediction_score_for_movie("Titanic", 1997, 2))
```

All users returned by `load_users` share the given `RecommendationSystem`.

**Movies.** `movierec.movie.Movie` is a frozen dataclass with `name` and
`year`. Movies are ordered by year, then by name. `str(movie)` gives
`Name(Year)`.

**`movierec.recommendation_system.RecommendationSystem`**

- `add_movie(name, year, features)` adds a movie, or replaces its features,
  and returns the `Movie`.
- `get_movie(name, year)` returns the movie, or `None` if it is not in the
  system.
- `recommend_by_content(user)` returns an unrated movie, or `None`. It
  raises `ValueError` if the system holds no movies.
- `recommend_by_cf(user, k)` returns an unrated movie, or `None`.
  - It returns a movie only if that movie's predicted score is higher than
    the prediction for the user's first rated movie.
  - It raises `ValueError` if the user has rated nothing.
- `predict_movie_score(user, movie, k)` computes a weighted average of the
  user's ratings for the `k` most similar rated movies. The weights are the
  cosine similarities. It raises `KeyError` for a movie that is not in the
  system.
- `str(system)` lists the movies, one per line, ordered by year, then name.

**`movierec.user.User`**

- `User(name, ranks, system)` takes a name, a mapping of `Movie` to rating,
  and a system. It exposes them as `name`, `ranks` and `system`.
- `add_movie_to_rs(name, year, features, rate)` adds a movie to the shared
  system and records the user's rating for it.
- `get_recommendation_by_content()`, `get_recommendation_by_cf(k)` and
  `get_prediction_score_for_movie(name, year, k)` pass the user to the
  system methods above.
- `str(user)` gives `name: <name>` followed by the movies in the system.

## Command line

```
movierec [MOVIES_FILE] [USERS_FILE]
```

The command loads both files. It prints the movies in the system, then the
first user.

- The file names default to `RecommendationSystemLoader_input.txt` and
  `UsersLoader_input.txt` in the current directory.
- On a `LoaderError` it prints the message to standard error and exits
  with status 1.

## What it does not do

- The command only loads and prints. It does not produce recommendations;
  use the library for that.
- Nothing is saved: ratings and movies added at run time live only in
  memory.