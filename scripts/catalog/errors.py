"""Error types for catalog build operations."""


class CatalogError(RuntimeError):
    """Base error type."""


class ReadError(CatalogError):
    """File or directory could not be opened, read or listed."""


class ParseError(CatalogError):
    """Manifest content is not valid JSON or does not match the album shape."""


class WriteError(CatalogError):
    """Manifest could not be written."""
