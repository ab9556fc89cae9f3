"""Core services exports."""

from .catalog_service import CatalogService

__all__ = ["CatalogService"]
