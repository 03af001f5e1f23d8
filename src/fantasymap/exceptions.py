"""Custom exceptions for map generation."""


class MapError(Exception):
    """Base exception for map errors."""

    pass


class RasterNotGeneratedError(MapError):
    """Raised when a raster is read or shaded before generate() was called."""

    pass
