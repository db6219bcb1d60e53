"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CatalogLookupError(DomainException):
    """Continent, country, city or university is not in the catalog"""

    pass


class RemotePredictionError(DomainException):
    """Remote cost procedure returned an error or is unavailable"""

    pass


class ImageSearchError(DomainException):
    """Image search failed or returned nothing usable"""

    pass
