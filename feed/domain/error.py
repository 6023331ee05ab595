"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when a user attempts to remove content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to delete {resource} {resource_id}"
        )


class AlreadyLikedError(DomainError):
    """Raised when a user likes a post they have already liked."""

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(f"User {user_id} already liked post {post_id}")


class NotLikedError(DomainError):
    """Raised when a user unlikes a post they have not liked."""

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has not yet liked post {post_id}")


class CommentNotFoundError(DomainError):
    """Raised when a comment id does not exist on a post."""

    def __init__(self, post_id: str, comment_id: str):
        self.post_id = post_id
        self.comment_id = comment_id
        super().__init__(f"Comment {comment_id} does not exist on post {post_id}")
