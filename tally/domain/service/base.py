"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services are stateless apart from their injected collaborators and are
    built fresh for every request by the DI container.
    """

    pass
