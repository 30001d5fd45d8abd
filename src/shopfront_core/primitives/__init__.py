from .exceptions import ShopfrontError, UnknownFieldError

__all__ = [
    "ShopfrontError",
    "UnknownFieldError",
]
