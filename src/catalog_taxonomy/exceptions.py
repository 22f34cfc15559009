"""Custom exceptions for Catalog Taxonomy."""


class CatalogTaxonomyError(Exception):
    """Base exception for all Catalog Taxonomy errors."""


class MalformedInputError(CatalogTaxonomyError):
    """Exception raised when a raw catalog payload lacks its values marker."""


class ReportWriteError(CatalogTaxonomyError):
    """Exception raised when the rendered report cannot be written."""


class ConfigurationError(CatalogTaxonomyError):
    """Exception raised for configuration related errors."""
