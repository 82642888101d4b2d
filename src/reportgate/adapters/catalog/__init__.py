"""Plugin catalog adapters implementing CatalogLookupPort."""

from reportgate.adapters.catalog.wordpress import WordPressPluginCatalog


__all__ = ["WordPressPluginCatalog"]
