"""FastAPI integration for the shopfront catalog."""

from .router import create_products_router

__all__: list[str] = ["create_products_router"]
