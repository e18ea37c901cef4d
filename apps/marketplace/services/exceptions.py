"""Domain exceptions for marketplace services."""


class MarketplaceServiceError(Exception):
    """Base exception for all marketplace service errors."""
    pass


class BuyerNotFoundError(MarketplaceServiceError):
    """Buyer does not exist."""
    pass


class InvalidBuyerError(MarketplaceServiceError):
    """Buyer name or country is missing."""
    pass


class RequestNotFoundError(MarketplaceServiceError):
    """Buyer request does not exist."""
    pass


class InvalidRequestError(MarketplaceServiceError):
    """Request quantities or form are invalid."""
    pass


class RequestClosedError(MarketplaceServiceError):
    """Request no longer takes offers."""
    pass


class OfferNotFoundError(MarketplaceServiceError):
    """Offer does not exist."""
    pass


class InvalidOfferError(MarketplaceServiceError):
    """Offer quantity or price is invalid."""
    pass


class OfferNotPendingError(MarketplaceServiceError):
    """Offer was already accepted or declined."""
    pass
