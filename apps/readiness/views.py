from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .requirements import required_documents
from .serializers import (
    DestinationQuerySerializer,
    RequiredDocumentsSerializer,
    destination_label,
)
from .services import resolve_destination


@extend_schema(
    parameters=[
        OpenApiParameter('dest', OpenApiTypes.STR, description='Destination code (AU, NZ, US)'),
    ],
    responses={200: RequiredDocumentsSerializer},
    description="Documents an exporter must prepare for a destination.",
    tags=['readiness'],
)
@api_view(['GET'])
def required_documents_view(request):
    """
    List required export documents for a destination.

    GET /api/readiness/required-documents/?dest=NZ
    """
    query = DestinationQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)

    code = resolve_destination(query.validated_data.get('dest'))
    serializer = RequiredDocumentsSerializer({
        'destination': code,
        'destination_name': destination_label(code),
        'documents': required_documents(code),
    })
    return Response(serializer.data)
