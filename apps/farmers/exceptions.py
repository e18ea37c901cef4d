"""
API exceptions for farmers app.

Service-layer errors live in ``apps.farmers.services.exceptions``; the views
translate them into these HTTP errors.
"""
from rest_framework.exceptions import APIException


class FarmerNotFound(APIException):
    """Farmer not found."""
    status_code = 404
    default_detail = 'Farmer not found.'
    default_code = 'farmer_not_found'


class BatchNotFound(APIException):
    """Batch not found."""
    status_code = 404
    default_detail = 'Batch not found.'
    default_code = 'batch_not_found'


class InvalidUpload(APIException):
    """Uploaded document is missing or unusable."""
    status_code = 400
    default_detail = 'Choose a file to upload.'
    default_code = 'invalid_upload'
