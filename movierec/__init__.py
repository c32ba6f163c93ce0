"""Movie recommendations by content and by item-to-item collaborative filtering."""

__version__ = "0.1.0"
__all__ = ["movie", "recommendation_system", "user", "loaders", "cli"]