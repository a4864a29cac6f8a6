"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business logic that spans entities or needs a
    repository; entities themselves stay plain, immutable data.
    """

    pass
