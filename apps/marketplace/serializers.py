from rest_framework import serializers

from apps.farmers.models import Batch
from apps.farmers.serializers import BatchListSerializer
from .models import Buyer, BuyerRequest, Offer, OfferStatus, RequestStatus
from .services import CULTIVAR_MATCH_THRESHOLD


# =============================================================================
# Input Serializers
# =============================================================================

class RequestFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for request filtering.

    Query Parameters:
        status (str): open or closed
    """

    status = serializers.ChoiceField(choices=RequestStatus.choices, required=False)


class OfferFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for offer filtering.

    Query Parameters:
        request (str): Only offers on this request
        status (str): pending, accepted or declined
    """

    request = serializers.CharField(max_length=16, required=False)
    status = serializers.ChoiceField(choices=OfferStatus.choices, required=False)


class MatchQuerySerializer(serializers.Serializer):
    threshold = serializers.IntegerField(
        min_value=0,
        max_value=100,
        required=False,
        default=CULTIVAR_MATCH_THRESHOLD
    )


# =============================================================================
# Output Serializers
# =============================================================================

class BuyerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Buyer
        fields = ['id', 'name', 'country', 'email', 'created_at']
        read_only_fields = ['id', 'created_at']


class BuyerRequestSerializer(serializers.ModelSerializer):
    """Buyer request; ``offer_count`` is present on list/retrieve."""

    buyer = serializers.PrimaryKeyRelatedField(queryset=Buyer.objects.all())
    buyer_name = serializers.CharField(source='buyer.name', read_only=True)
    offer_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = BuyerRequest
        fields = [
            'id',
            'buyer',
            'buyer_name',
            'destination',
            'form',
            'cultivar',
            'min_kg',
            'max_kg',
            'status',
            'offer_count',
            'created_at',
        ]
        read_only_fields = ['id', 'status', 'offer_count', 'created_at']

    def validate(self, attrs):
        """Validate quantity range."""
        min_kg = attrs.get('min_kg')
        max_kg = attrs.get('max_kg')

        if min_kg is not None and max_kg is not None and min_kg > max_kg:
            raise serializers.ValidationError({
                'max_kg': 'Max kg must not be less than min kg'
            })

        return attrs


class OfferSerializer(serializers.ModelSerializer):
    request = serializers.PrimaryKeyRelatedField(queryset=BuyerRequest.objects.all())
    batch = serializers.PrimaryKeyRelatedField(queryset=Batch.objects.all())
    farmer_name = serializers.CharField(source='batch.farmer.name', read_only=True)

    class Meta:
        model = Offer
        fields = [
            'id',
            'request',
            'batch',
            'farmer_name',
            'quantity_kg',
            'price_per_kg',
            'note',
            'status',
            'created_at',
        ]
        read_only_fields = ['id', 'farmer_name', 'status', 'created_at']


class BatchMatchSerializer(serializers.Serializer):
    """A batch that could fill a request, with its cultivar similarity score."""

    batch = BatchListSerializer()
    score = serializers.IntegerField()
