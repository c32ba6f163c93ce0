"""Reading movie feature files and user rank files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Union

from movierec.movie import Movie
from movierec.recommendation_system import RecommendationSystem
from movierec.user import User

PathLike = Union[str, Path]

LOWER_BOUND = 1
UPPER_BOUND = 10
YEAR_SEPARATOR = "-"
NOT_AVAILABLE = "NA"

MOVIES_FILE_ERROR = "Problem with reading the file"
MOVIES_SCORE_ERROR = "The score is invalid"
USERS_FILE_ERROR = "problem with reading the file"
USERS_SCORE_ERROR = "the score is invalid"

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class LoaderError(RuntimeError):
    """Raised when an input file cannot be read or holds invalid data."""


def _read_lines(path: PathLike, message: str) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().splitlines()
    except OSError as exc:
        raise LoaderError(message) from exc


def _split_name_year(entry: str) -> tuple[str, int, str]:
    """Split ``name-year rest`` into name, year and the text after the year."""
    name, _, rest = entry.partition(YEAR_SEPARATOR)
    match = _INTEGER.match(rest)
    if match is None:
        raise LoaderError(f"missing year in entry: {entry!r}")
    return name, int(match.group(1)), rest[match.end():]


def _in_bounds(score: float) -> bool:
    return LOWER_BOUND <= score <= UPPER_BOUND


def load_recommendation_system(path: PathLike) -> RecommendationSystem:
    """Build a recommendation system from a file of ``name-year f1 f2 ...`` lines."""
    system = RecommendationSystem()
    for line in _read_lines(path, MOVIES_FILE_ERROR):
        if not line.strip():
            continue
        name, year, rest = _split_name_year(line)
        features = []
        for token in rest.split():
            if not _NUMBER.fullmatch(token):
                break
            score = float(token)
            if not _in_bounds(score):
                raise LoaderError(MOVIES_SCORE_ERROR)
            features.append(score)
        system.add_movie(name, year, features)
    return system


def _parse_score(token: str) -> float:
    match = _NUMBER.match(token)
    if match is None:
        raise LoaderError(f"invalid score: {token!r}")
    return float(match.group(0))


def load_users(path: PathLike, system: RecommendationSystem) -> list[User]:
    """Read users and their ranks; every user shares the given system.

    The first line lists the movies as ``name-year`` entries; each following
    line holds a user name and one score (or ``NA``) per listed movie.
    """
    lines = _read_lines(path, USERS_FILE_ERROR)
    if not lines:
        return []
    movies = []
    for entry in lines[0].split():
        name, year, _ = _split_name_year(entry)
        movies.append(Movie(name, year))

    users = []
    for line in lines[1:]:
        tokens = line.split()
        if not tokens:
            continue
        user_name, *scores = tokens
        ranks: dict[Movie, float] = {}
        for index, token in enumerate(scores):
            if token == NOT_AVAILABLE:
                continue
            score = _parse_score(token)
            if not _in_bounds(score):
                raise LoaderError(USERS_SCORE_ERROR)
            if index >= len(movies):
                raise LoaderError(
                    f"user {user_name!r} has more scores than listed movies"
                )
            ranks[movies[index]] = score
        users.append(User(user_name, ranks, system))
    return users