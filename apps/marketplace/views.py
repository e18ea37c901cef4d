from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.farmers.services import BatchNotFoundError
from .exceptions import OfferAlreadyDecided, OfferNotFound, RequestClosed, RequestNotFound
from .models import Offer
from .serializers import (
    BatchMatchSerializer,
    BuyerRequestSerializer,
    BuyerSerializer,
    MatchQuerySerializer,
    OfferFilterSerializer,
    OfferSerializer,
    RequestFilterSerializer,
)
from .services import (
    BuyerNotFoundError,
    InvalidBuyerError,
    InvalidOfferError,
    InvalidRequestError,
    OfferNotFoundError,
    OfferNotPendingError,
    RequestClosedError,
    RequestNotFoundError,
    accept_offer,
    close_request,
    find_matching_batches,
    list_buyers,
    list_requests,
    make_offer,
    post_request,
    register_buyer,
)


class MarketplacePagination(PageNumberPagination):
    """Custom pagination for marketplace lists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BuyerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for buyer registration.

    list: Get all buyers
    create: Register a buyer
    retrieve: Get a specific buyer
    """

    serializer_class = BuyerSerializer
    pagination_class = MarketplacePagination
    http_method_names = ['get', 'post', 'head', 'options']

    def get_queryset(self):
        return list_buyers()

    def perform_create(self, serializer):
        """Register buyer using service layer."""
        try:
            buyer = register_buyer(
                name=serializer.validated_data['name'],
                country=serializer.validated_data['country'],
                email=serializer.validated_data.get('email', ''),
            )
        except InvalidBuyerError as e:
            raise ValidationError(str(e))

        serializer.instance = buyer


class BuyerRequestViewSet(viewsets.ModelViewSet):
    """
    ViewSet for buyer requests.

    list: Get requests, newest first (filterable by status)
    create: Post a request
    retrieve: Get a specific request
    """

    serializer_class = BuyerRequestSerializer
    pagination_class = MarketplacePagination
    http_method_names = ['get', 'post', 'head', 'options']

    def get_queryset(self):
        """Filter requests using input serializer validation."""
        filter_serializer = RequestFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_requests(status=filter_serializer.validated_data.get('status'))

    def perform_create(self, serializer):
        """Post request using service layer."""
        data = serializer.validated_data
        try:
            buyer_request = post_request(
                buyer_id=data['buyer'].pk,
                destination=data['destination'],
                form=data['form'],
                min_kg=data['min_kg'],
                max_kg=data['max_kg'],
                cultivar=data.get('cultivar', ''),
            )
        except (BuyerNotFoundError, InvalidRequestError) as e:
            raise ValidationError(str(e))

        serializer.instance = buyer_request

    @extend_schema(
        parameters=[
            OpenApiParameter('threshold', OpenApiTypes.INT, description='Minimum cultivar similarity (0-100)'),
        ],
        responses={200: BatchMatchSerializer(many=True)},
    )
    @action(detail=True, methods=['get'])
    def matches(self, request, pk=None):
        """
        Batches that could fill this request, best cultivar match first.

        GET /api/marketplace/requests/{id}/matches/?threshold=80
        """
        query = MatchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            matches = find_matching_batches(
                request_id=pk,
                threshold=query.validated_data['threshold'],
            )
        except RequestNotFoundError:
            raise RequestNotFound()

        serializer = BatchMatchSerializer(
            [{'batch': batch, 'score': score} for batch, score in matches],
            many=True
        )
        return Response(serializer.data)

    @extend_schema(request=None, responses={200: BuyerRequestSerializer})
    @action(detail=True, methods=['post'])
    def close(self, request, pk=None):
        """
        Stop taking offers on this request.

        POST /api/marketplace/requests/{id}/close/
        """
        try:
            buyer_request = close_request(request_id=pk)
        except RequestNotFoundError:
            raise RequestNotFound()

        return Response(BuyerRequestSerializer(buyer_request).data)


class OfferViewSet(viewsets.ModelViewSet):
    """
    ViewSet for offers against buyer requests.

    list: Get offers (filterable by request and status)
    create: Offer a batch on an open request
    retrieve: Get a specific offer
    """

    queryset = Offer.objects.select_related('request', 'batch', 'batch__farmer')
    serializer_class = OfferSerializer
    pagination_class = MarketplacePagination
    http_method_names = ['get', 'post', 'head', 'options']

    def get_queryset(self):
        """Filter offers using input serializer validation."""
        queryset = super().get_queryset()

        filter_serializer = OfferFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params.get('request'):
            queryset = queryset.filter(request_id=params['request'])
        if params.get('status'):
            queryset = queryset.filter(status=params['status'])

        return queryset

    def perform_create(self, serializer):
        """Make offer using service layer."""
        data = serializer.validated_data
        try:
            offer = make_offer(
                request_id=data['request'].pk,
                batch_id=data['batch'].pk,
                quantity_kg=data['quantity_kg'],
                price_per_kg=data.get('price_per_kg'),
                note=data.get('note', ''),
            )
        except RequestClosedError as e:
            raise RequestClosed(str(e))
        except (RequestNotFoundError, BatchNotFoundError, InvalidOfferError) as e:
            raise ValidationError(str(e))

        serializer.instance = offer

    @extend_schema(request=None, responses={200: OfferSerializer})
    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        """
        Accept this offer, decline the others and close the request.

        POST /api/marketplace/offers/{id}/accept/
        """
        try:
            offer = accept_offer(offer_id=pk)
        except OfferNotFoundError:
            raise OfferNotFound()
        except OfferNotPendingError as e:
            raise OfferAlreadyDecided(str(e))
        except RequestClosedError as e:
            raise RequestClosed(str(e))

        return Response(OfferSerializer(offer).data, status=status.HTTP_200_OK)
