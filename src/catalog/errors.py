"""Exceptions raised while loading, validating and ingesting the product catalog."""


class CatalogError(Exception):
    pass


class MissingInputError(CatalogError, FileNotFoundError):
    """A required input file (JSON document, template, spreadsheet) does not exist."""

    def __init__(self, path, what: str = "input file"):
        self.path = path
        super().__init__(f"Missing {what}: {path}")


class MalformedCatalogError(CatalogError, ValueError):
    pass


class ProductValidationError(CatalogError):
    pass


class InvalidIdentifierError(ProductValidationError):
    def __init__(self, raw_id):
        self.raw_id = raw_id
        super().__init__(
            f'Invalid product.id "{raw_id}". Use only a-z, 0-9, hyphen (-).'
        )


class IngestError(CatalogError):
    pass


__all__ = [
    "CatalogError",
    "MissingInputError",
    "MalformedCatalogError",
    "ProductValidationError",
    "InvalidIdentifierError",
    "IngestError",
]
