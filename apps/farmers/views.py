from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.readiness.serializers import (
    BatchReadinessReportSerializer,
    FarmerReadinessSerializer,
)
from apps.readiness.services import build_batch_readiness, build_farmer_readiness
from .exceptions import BatchNotFound, FarmerNotFound, InvalidUpload
from .models import Batch
from .serializers import (
    BatchDocumentSerializer,
    BatchFilterSerializer,
    BatchListSerializer,
    BatchSerializer,
    DocumentUploadSerializer,
    FarmerSerializer,
)
from .services import (
    BatchNotFoundError,
    FarmerNotFoundError,
    InvalidBatchError,
    InvalidDocumentError,
    InvalidFarmerError,
    attach_document,
    list_batches,
    list_farmers,
    record_batch,
    register_farmer,
)


DEST_PARAMETER = OpenApiParameter(
    'dest', OpenApiTypes.STR, description='Destination code (AU, NZ, US)'
)


class FarmersPagination(PageNumberPagination):
    """Custom pagination for farmers and batches."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class FarmerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for farmer registration.

    list: Get all farmers with their batch counts
    create: Register a farmer
    retrieve: Get a specific farmer
    """

    serializer_class = FarmerSerializer
    pagination_class = FarmersPagination
    http_method_names = ['get', 'post', 'head', 'options']

    def get_queryset(self):
        return list_farmers()

    def perform_create(self, serializer):
        """Register farmer using service layer."""
        try:
            farmer = register_farmer(
                name=serializer.validated_data['name'],
                island=serializer.validated_data['island'],
                village=serializer.validated_data['village'],
                phone=serializer.validated_data.get('phone', ''),
            )
        except InvalidFarmerError as e:
            raise ValidationError(str(e))

        serializer.instance = farmer

    @extend_schema(responses={200: BatchSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def batches(self, request, pk=None):
        """
        Get all batches of this farmer.

        GET /api/farmers/{id}/batches/
        """
        farmer = self.get_object()
        batches = list_batches(farmer_id=farmer.id)
        serializer = BatchSerializer(batches, many=True)
        return Response(serializer.data)

    @extend_schema(parameters=[DEST_PARAMETER], responses={200: FarmerReadinessSerializer})
    @action(detail=True, methods=['get'])
    def readiness(self, request, pk=None):
        """
        Export readiness of every batch of this farmer.

        GET /api/farmers/{id}/readiness/?dest=NZ
        """
        try:
            report = build_farmer_readiness(
                farmer_id=pk,
                destination=request.query_params.get('dest'),
            )
        except FarmerNotFoundError:
            raise FarmerNotFound()

        serializer = FarmerReadinessSerializer(report)
        return Response(serializer.data)


class BatchViewSet(viewsets.ModelViewSet):
    """
    ViewSet for kava batches.

    list: Get batches (filterable by farmer and form)
    create: Record a batch for a farmer
    retrieve: Get a batch with its documents
    """

    queryset = Batch.objects.select_related('farmer').prefetch_related('documents')
    serializer_class = BatchSerializer
    pagination_class = FarmersPagination
    http_method_names = ['get', 'post', 'head', 'options']

    def get_queryset(self):
        """Filter batches using input serializer validation."""
        queryset = super().get_queryset()

        filter_serializer = BatchFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('farmer'):
            queryset = queryset.filter(farmer_id=params['farmer'])
        if params.get('form'):
            queryset = queryset.filter(form=params['form'].lower())

        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return BatchListSerializer
        return BatchSerializer

    def perform_create(self, serializer):
        """Record batch using service layer."""
        data = serializer.validated_data
        try:
            batch = record_batch(
                farmer_id=data['farmer'].pk,
                cultivar=data['cultivar'],
                form=data['form'],
                weight_kg=data['weight_kg'],
                harvest_date=data['harvest_date'],
                gi=data.get('gi', 'yes'),
                lab=data.get('lab', 'no'),
            )
        except (FarmerNotFoundError, InvalidBatchError) as e:
            raise ValidationError(str(e))

        serializer.instance = batch

    @extend_schema(parameters=[DEST_PARAMETER], responses={200: BatchReadinessReportSerializer})
    @action(detail=True, methods=['get'])
    def readiness(self, request, pk=None):
        """
        Export readiness of this batch.

        GET /api/batches/{id}/readiness/?dest=US
        """
        try:
            report = build_batch_readiness(
                batch_id=pk,
                destination=request.query_params.get('dest'),
            )
        except BatchNotFoundError:
            raise BatchNotFound()

        serializer = BatchReadinessReportSerializer(report)
        return Response(serializer.data)

    @extend_schema(
        methods=['GET'],
        responses={200: BatchDocumentSerializer(many=True)},
    )
    @extend_schema(
        methods=['POST'],
        request={'multipart/form-data': DocumentUploadSerializer},
        responses={201: BatchDocumentSerializer},
    )
    @action(
        detail=True,
        methods=['get', 'post'],
        parser_classes=[MultiPartParser, FormParser, JSONParser],
    )
    def documents(self, request, pk=None):
        """
        List or upload documents of this batch.

        GET  /api/batches/{id}/documents/
        POST /api/batches/{id}/documents/  (multipart: file, doc_type)
        """
        batch = self.get_object()

        if request.method == 'GET':
            serializer = BatchDocumentSerializer(batch.documents.all(), many=True)
            return Response(serializer.data)

        upload = DocumentUploadSerializer(data=request.data)
        upload.is_valid(raise_exception=True)

        try:
            document = attach_document(
                batch_id=batch.id,
                uploaded_file=upload.validated_data['file'],
                doc_type=upload.validated_data['doc_type'],
            )
        except BatchNotFoundError:
            raise BatchNotFound()
        except InvalidDocumentError as e:
            raise InvalidUpload(str(e))

        return Response(BatchDocumentSerializer(document).data, status=status.HTTP_201_CREATED)
