"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans aggregates or needs a
    repository, such as moderation and the engagement counters.
    """

    pass
