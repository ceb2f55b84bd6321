class AuthError(Exception):
    """Raised when submitted credentials do not resolve to a viewer identity."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class FetchError(Exception):
    """Raised when any page request fails while loading orders.

    The whole fetch is discarded; no partially loaded collection survives.
    """

    def __init__(self, message: str = "Failed to load orders.") -> None:
        super().__init__(message)
