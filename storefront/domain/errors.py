# storefront/domain/errors.py


class AuthenticationRequired(PermissionError):
    """Cart mutation attempted without a signed-in user."""

    def __init__(
        self,
        notice: str = "You need to be logged in to add items to cart.",
        title: str = "Please Sign In",
    ):
        super().__init__(notice)
        self.title = title
        self.notice = notice


class ProductNotFound(LookupError):
    pass


class RemoteStoreError(RuntimeError):
    """Remote store rejected or failed an awaited request."""
