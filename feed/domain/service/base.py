"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that act on the Post aggregate.
    """

    pass
