import math

import pytest

from movierec.movie import Movie
from movierec.recommendation_system import RecommendationSystem
from movierec.user import User


@pytest.fixture
def system():
    rs = RecommendationSystem()
    rs.add_movie("Action", 2000, [10, 1])
    rs.add_movie("Drama", 2001, [1, 10])
    rs.add_movie("ActionTwo", 2002, [9, 2])
    rs.add_movie("DramaTwo", 2003, [2, 9])
    return rs


def test_add_and_get_movie(system):
    assert system.get_movie("Action", 2000) == Movie("Action", 2000)


def test_get_missing_movie_is_none(system):
    assert system.get_movie("Action", 1999) is None


def test_add_returns_movie():
    rs = RecommendationSystem()
    assert rs.add_movie("X", 2010, [1, 2]) == Movie("X", 2010)


def test_str_lists_movies_in_order():
    rs = RecommendationSystem()
    rs.add_movie("B", 2000, [1])
    rs.add_movie("A", 2000, [1])
    rs.add_movie("C", 1990, [1])
    assert str(rs) == "C(1990)\nA(2000)\nB(2000)\n"


def test_re_adding_does_not_duplicate():
    rs = RecommendationSystem()
    rs.add_movie("A", 2000, [1])
    rs.add_movie("A", 2000, [2])
    assert str(rs) == "A(2000)\n"


def test_content_recommends_similar_to_liked(system):
    user = User("u", {Movie("Action", 2000): 10, Movie("Drama", 2001): 2}, system)
    assert system.recommend_by_content(user) == Movie("ActionTwo", 2002)


def test_content_follows_taste(system):
    user = User("u", {Movie("Action", 2000): 2, Movie("Drama", 2001): 10}, system)
    assert system.recommend_by_content(user) == Movie("DramaTwo", 2003)


def test_content_empty_system_raises():
    rs = RecommendationSystem()
    with pytest.raises(ValueError):
        rs.recommend_by_content(User("u", {}, rs))


def test_content_without_ranks_is_none(system):
    assert system.recommend_by_content(User("u", {}, system)) is None


def test_content_all_ranked_is_none(system):
    ranks = {Movie(n, y): 5 for n, y in
             [("Action", 2000), ("Drama", 2001), ("ActionTwo", 2002), ("DramaTwo", 2003)]}
    assert system.recommend_by_content(User("u", ranks, system)) is None


def test_predict_with_nearest_neighbour(system):
    user = User("u", {Movie("Action", 2000): 10, Movie("Drama", 2001): 2}, system)
    assert system.predict_movie_score(user, Movie("ActionTwo", 2002), 1) == pytest.approx(10)
    assert system.predict_movie_score(user, Movie("DramaTwo", 2003), 1) == pytest.approx(2)


def test_prediction_lies_between_ranks(system):
    user = User("u", {Movie("Action", 2000): 10, Movie("Drama", 2001): 2}, system)
    for movie in (Movie("ActionTwo", 2002), Movie("DramaTwo", 2003)):
        score = system.predict_movie_score(user, movie, 2)
        assert 2 <= score <= 10


def test_predict_zero_k_is_nan(system):
    user = User("u", {Movie("Action", 2000): 10}, system)
    score = system.predict_movie_score(user, Movie("Drama", 2001), 0)
    assert math.isnan(score) is True


def test_predict_unknown_movie_raises(system):
    user = User("u", {Movie("Action", 2000): 10}, system)
    with pytest.raises(KeyError):
        system.predict_movie_score(user, Movie("Missing", 1900), 1)


def test_cf_recommends_best_predicted(system):
    user = User("u", {Movie("Drama", 2001): 2, Movie("Action", 2000): 10}, system)
    assert system.recommend_by_cf(user, 2) == Movie("ActionTwo", 2002)


def test_cf_without_ranks_raises(system):
    with pytest.raises(ValueError):
        system.recommend_by_cf(User("u", {}, system), 1)


def test_cf_all_ranked_is_none(system):
    ranks = {Movie(n, y): 5 for n, y in
             [("Action", 2000), ("Drama", 2001), ("ActionTwo", 2002), ("DramaTwo", 2003)]}
    assert system.recommend_by_cf(User("u", ranks, system), 2) is None