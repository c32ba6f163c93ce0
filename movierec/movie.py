"""Movies identified by name and release year."""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Movie:
    """A movie, ordered by year and then by name."""

    name: str
    year: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return (self.year, self.name) < (other.year, other.name)

    def __str__(self) -> str:
        return f"{self.name}({self.year})"