"""Repository interfaces for the feed domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from feed.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
]
