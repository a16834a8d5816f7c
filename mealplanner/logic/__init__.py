"""Core business logic layer.

Subpackages:
- shopping: ingredient categories, store selection, grocery list generation and views
- pantry: pantry analysis helpers
- reporting: recipe rating aggregation
- recipes: catalogue search and filters
"""
__all__ = ["shopping", "pantry", "reporting", "recipes"]
