from rest_framework import serializers

from .requirements import Destination


# =============================================================================
# Input Serializers
# =============================================================================

class DestinationQuerySerializer(serializers.Serializer):
    """
    Validate the destination query parameter.

    Query Parameters:
        dest (str): Destination code, case-insensitive. Codes outside
            AU/NZ/US are accepted and get the base documents only.
    """

    dest = serializers.CharField(required=False, allow_blank=True)


# =============================================================================
# Output Serializers
# =============================================================================

class ReadinessCheckSerializer(serializers.Serializer):
    key = serializers.CharField()
    label = serializers.CharField()
    passed = serializers.BooleanField()


class ReadinessResultSerializer(serializers.Serializer):
    """Overall verdict plus the individual checks, in rule order."""

    overall = serializers.BooleanField()
    checks = ReadinessCheckSerializer(many=True)


class NormalizedBatchSerializer(serializers.Serializer):
    """Batch as the evaluator saw it, whichever store it came from."""

    id = serializers.CharField(allow_null=True)
    farmer_id = serializers.CharField(allow_null=True)
    cultivar = serializers.CharField(allow_null=True)
    form = serializers.CharField(allow_null=True)
    weight = serializers.CharField(allow_null=True)
    harvest_date = serializers.CharField(allow_null=True)
    gi = serializers.CharField(allow_null=True)
    lab = serializers.CharField(allow_null=True)


class DocumentRecordSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True)
    type = serializers.CharField()
    name = serializers.CharField()
    url = serializers.CharField()


class FarmerRecordSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    island = serializers.CharField(default='')
    village = serializers.CharField(default='')
    phone = serializers.CharField(default='')


class BatchReadinessSerializer(serializers.Serializer):
    batch = NormalizedBatchSerializer()
    result = ReadinessResultSerializer()
    documents = DocumentRecordSerializer(many=True)


class FarmerReadinessSerializer(serializers.Serializer):
    """Readiness report for every batch of one farmer."""

    farmer = FarmerRecordSerializer()
    destination = serializers.CharField()
    required_documents = serializers.ListField(child=serializers.CharField())
    batches = BatchReadinessSerializer(many=True)
    ready_count = serializers.IntegerField()


class RequiredDocumentsSerializer(serializers.Serializer):
    destination = serializers.CharField()
    destination_name = serializers.CharField(allow_null=True)
    documents = serializers.ListField(child=serializers.CharField())


class BatchReadinessReportSerializer(BatchReadinessSerializer):
    """Readiness of one batch for a destination."""

    destination = serializers.CharField()
    required_documents = serializers.ListField(child=serializers.CharField())


def destination_label(code):
    """Display name for a known destination code, None for anything else."""
    if code in Destination.values:
        return Destination(code).label
    return None
