"""Users with movie ranks, backed by a shared recommendation system."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from movierec.movie import Movie
from movierec.recommendation_system import RecommendationSystem


class User:
    """A named user holding ranks for movies."""

    def __init__(
        self, name: str, ranks: Mapping[Movie, float], system: RecommendationSystem
    ) -> None:
        self.name = name
        self.ranks: dict[Movie, float] = dict(ranks)
        self.system = system

    def add_movie_to_rs(
        self, name: str, year: int, features: Iterable[float], rate: float
    ) -> None:
        """Rank a new movie and add it to the recommendation system."""
        self.ranks[Movie(name, year)] = rate
        self.system.add_movie(name, year, features)

    def get_recommendation_by_content(self) -> Optional[Movie]:
        return self.system.recommend_by_content(self)

    def get_recommendation_by_cf(self, k: int) -> Optional[Movie]:
        return self.system.recommend_by_cf(self, k)

    def get_prediction_score_for_movie(self, name: str, year: int, k: int) -> float:
        return self.system.predict_movie_score(self, Movie(name, year), k)

    def __str__(self) -> str:
        return f"name: {self.name}\n{self.system}\n"