"""PostgreSQL repository implementations."""

from feed.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
