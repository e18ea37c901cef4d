"""
API exceptions for marketplace app.

Raised by the marketplace views when a service refuses an operation because
of the current state of a request or offer.
"""
from rest_framework.exceptions import APIException


class RequestNotFound(APIException):
    """Buyer request not found."""
    status_code = 404
    default_detail = 'Buyer request not found.'
    default_code = 'request_not_found'


class RequestClosed(APIException):
    """Buyer request no longer takes offers."""
    status_code = 409
    default_detail = 'This request is closed.'
    default_code = 'request_closed'


class OfferNotFound(APIException):
    """Offer not found."""
    status_code = 404
    default_detail = 'Offer not found.'
    default_code = 'offer_not_found'


class OfferAlreadyDecided(APIException):
    """Offer was already accepted or declined."""
    status_code = 409
    default_detail = 'Offer has already been accepted or declined.'
    default_code = 'offer_already_decided'
