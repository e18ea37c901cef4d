from rest_framework import serializers
from .models import Farmer, Batch, BatchDocument, DocumentType


# =============================================================================
# Input Serializers
# =============================================================================

class BatchFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for batch filtering.

    Query Parameters:
        farmer (str): Only batches of this farmer
        form (str): Only batches of this form
    """

    farmer = serializers.CharField(max_length=16, required=False)
    form = serializers.CharField(max_length=10, required=False)


class DocumentUploadSerializer(serializers.Serializer):
    """
    Validate a multipart document upload.

    Fields:
        file (file): The document itself
        doc_type (str): lab, invoice, packing, coo or other. Unknown values
            are stored as 'other'.
    """

    file = serializers.FileField()
    doc_type = serializers.CharField(max_length=20, required=False, default=DocumentType.OTHER)


# =============================================================================
# Output Serializers
# =============================================================================

class BatchDocumentSerializer(serializers.ModelSerializer):
    """Uploaded document with a link to the stored file."""

    url = serializers.ReadOnlyField()

    class Meta:
        model = BatchDocument
        fields = ['id', 'batch', 'doc_type', 'name', 'url', 'uploaded_at']
        read_only_fields = fields


class FarmerSerializer(serializers.ModelSerializer):
    """Farmer record; ``batch_count`` is present on list/retrieve."""

    batch_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Farmer
        fields = [
            'id',
            'name',
            'island',
            'village',
            'phone',
            'batch_count',
            'created_at',
        ]
        read_only_fields = ['id', 'batch_count', 'created_at']


class BatchSerializer(serializers.ModelSerializer):
    """Batch with its documents."""

    farmer = serializers.PrimaryKeyRelatedField(queryset=Farmer.objects.all())
    documents = BatchDocumentSerializer(many=True, read_only=True)

    class Meta:
        model = Batch
        fields = [
            'id',
            'farmer',
            'cultivar',
            'form',
            'weight_kg',
            'harvest_date',
            'gi',
            'lab',
            'documents',
            'created_at',
        ]
        read_only_fields = ['id', 'documents', 'created_at']


class BatchListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for batch lists."""

    farmer_name = serializers.CharField(source='farmer.name', read_only=True)

    class Meta:
        model = Batch
        fields = [
            'id',
            'farmer',
            'farmer_name',
            'cultivar',
            'form',
            'weight_kg',
            'harvest_date',
            'gi',
            'lab',
            'created_at',
        ]
        read_only_fields = fields
