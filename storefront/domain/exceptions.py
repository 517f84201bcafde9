"""Domain exceptions."""


class StorefrontError(Exception):
    """Base class for errors raised by the storefront package."""


class NotFoundError(StorefrontError):
    """Requested aggregate does not exist."""


class OrderNotFoundError(NotFoundError):
    def __init__(self, message: str = "Order not found"):
        super().__init__(message)


class CustomerNotFoundError(NotFoundError):
    def __init__(self, message: str = "Customer not found"):
        super().__init__(message)


class ProductNotFoundError(NotFoundError):
    def __init__(self, message: str = "Product not found"):
        super().__init__(message)
