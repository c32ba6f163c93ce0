"""Content-based and item collaborative-filtering movie recommendations."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from movierec.movie import Movie

if TYPE_CHECKING:
    from movierec.user import User


def _dot(first: Sequence[float], second: Sequence[float]) -> float:
    return sum(a * b for a, b in zip(first, second))


def _norm(vector: Sequence[float]) -> float:
    return math.sqrt(sum(x * x for x in vector))


def _divide(numerator: float, denominator: float) -> float:
    """Divide with floating-point semantics instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _similarity(first: Sequence[float], second: Sequence[float]) -> float:
    """Cosine of the angle between two vectors."""
    return _divide(_dot(first, second), _norm(first) * _norm(second))


class RecommendationSystem:
    """Holds movies with their feature vectors and recommends among them."""

    def __init__(self) -> None:
        self._features: dict[Movie, tuple[float, ...]] = {}

    def add_movie(self, name: str, year: int, features: Iterable[float]) -> Movie:
        """Add a movie (or replace its features) and return it."""
        movie = Movie(name, year)
        self._features[movie] = tuple(float(value) for value in features)
        return movie

    def _movies(self) -> list[Movie]:
        return sorted(self._features)

    def _features_of(self, movie: Movie) -> tuple[float, ...]:
        try:
            return self._features[movie]
        except KeyError:
            raise KeyError(f"unknown movie: {movie}") from None

    def recommend_by_content(self, user: User) -> Optional[Movie]:
        """Return the unranked movie closest to the user's taste profile."""
        movies = self._movies()
        if not movies:
            raise ValueError("the system holds no movies")
        ranks = user.ranks
        average = sum(ranks.values()) / len(ranks) if ranks else 0.0
        preference = [0.0] * len(self._features[movies[0]])
        for movie, rank in ranks.items():
            weight = rank - average
            preference = [
                total + value * weight
                for total, value in zip(preference, self._features_of(movie))
            ]

        best: Optional[Movie] = None
        best_score = -1.0
        for movie in movies:
            if movie in ranks:
                continue
            score = _similarity(preference, self._features[movie])
            if score > best_score:
                best_score = score
                best = movie
        return best

    def recommend_by_cf(self, user: User, k: int) -> Optional[Movie]:
        """Return the unranked movie with the highest predicted score."""
        ranks = user.ranks
        if not ranks:
            raise ValueError("the user has no ranked movies")
        best_score = self.predict_movie_score(user, next(iter(ranks)), k)
        best: Optional[Movie] = None
        for movie in self._movies():
            if movie in ranks:
                continue
            score = self.predict_movie_score(user, movie, k)
            if score > best_score:
                best_score = score
                best = movie
        return best

    def predict_movie_score(self, user: User, movie: Movie, k: int) -> float:
        """Predict the user's rank for a movie from its k most similar ranked movies."""
        target = self._features_of(movie)
        ranks = user.ranks
        scored = [
            (_similarity(target, self._features_of(watched)), position, watched)
            for position, watched in enumerate(ranks)
        ]
        scored.sort(key=lambda item: (item[0], item[1]), reverse=True)
        nearest = scored[: max(k, 0)]
        numerator = sum(similarity * ranks[watched] for similarity, _, watched in nearest)
        denominator = sum(similarity for similarity, _, _ in nearest)
        return _divide(numerator, denominator)

    def get_movie(self, name: str, year: int) -> Optional[Movie]:
        """Return the movie with this name and year, or None."""
        movie = Movie(name, year)
        return movie if movie in self._features else None

    def __str__(self) -> str:
        return "".join(f"{movie}\n" for movie in self._movies())