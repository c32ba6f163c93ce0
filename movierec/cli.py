"""Command that loads movies and users and prints them."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from movierec.loaders import LoaderError, load_recommendation_system, load_users


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a movie file and a users file, then print the system and first user."""
    parser = argparse.ArgumentParser(
        prog="movierec", description="Load movies and users and print them."
    )
    parser.add_argument(
        "movies", nargs="?", default="RecommendationSystemLoader_input.txt",
        help="file of movies with their feature scores",
    )
    parser.add_argument(
        "users", nargs="?", default="UsersLoader_input.txt",
        help="file of users with their movie ranks",
    )
    args = parser.parse_args(argv)

    try:
        system = load_recommendation_system(args.movies)
        print(system)
        users = load_users(args.users, system)
    except LoaderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if users:
        print(users[0])
    return 0


if __name__ == "__main__":
    sys.exit(main())