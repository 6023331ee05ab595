"""Like value object."""

from feed.domain.value import UserId, ValueObject


class Like(ValueObject):
    """A user's like, embedded in ``Post.likes``.

    Created on first like, destroyed on unlike, never updated in place.
    """

    user_id: UserId
