"""
Marketplace services - Business logic layer.

This package contains all business operations for the marketplace app:
- Buyer registration
- Buyer requests (post, list, close)
- Offers against requests (make, accept)
- Matching batches to requests
"""

from .buyer_management import (
    register_buyer,
    get_buyer,
    list_buyers,
)
from .request_management import (
    post_request,
    get_request,
    list_requests,
    close_request,
)
from .offer_management import (
    make_offer,
    accept_offer,
    get_offer,
    list_offers,
)
from .batch_matching import (
    normalize_cultivar,
    find_matching_batches,
    CULTIVAR_MATCH_THRESHOLD,
)

# Domain Exceptions
from .exceptions import (
    MarketplaceServiceError,
    BuyerNotFoundError,
    InvalidBuyerError,
    RequestNotFoundError,
    InvalidRequestError,
    RequestClosedError,
    OfferNotFoundError,
    InvalidOfferError,
    OfferNotPendingError,
)

__all__ = [
    # Buyer Management
    'register_buyer',
    'get_buyer',
    'list_buyers',
    # Request Management
    'post_request',
    'get_request',
    'list_requests',
    'close_request',
    # Offer Management
    'make_offer',
    'accept_offer',
    'get_offer',
    'list_offers',
    # Batch Matching
    'normalize_cultivar',
    'find_matching_batches',
    'CULTIVAR_MATCH_THRESHOLD',
    # Exceptions
    'MarketplaceServiceError',
    'BuyerNotFoundError',
    'InvalidBuyerError',
    'RequestNotFoundError',
    'InvalidRequestError',
    'RequestClosedError',
    'OfferNotFoundError',
    'InvalidOfferError',
    'OfferNotPendingError',
]
