from .catalog import router as catalog_routes
from .calculator import router as calculator_routes

__all__ = [
    "catalog_routes",
    "calculator_routes",
]
