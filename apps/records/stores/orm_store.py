"""Record store backed by the Django models."""

import logging
from typing import Any, List, Optional

from django.db import models, transaction

from apps.farmers.models import Farmer, Batch, BatchDocument, DocumentType
from apps.marketplace.models import Buyer, BuyerRequest, Offer
from .base import RecordStore

logger = logging.getLogger(__name__)


MODELS = {
    'farmers': Farmer,
    'batches': Batch,
    'buyers': Buyer,
    'requests': BuyerRequest,
    'offers': Offer,
}


def _document_to_record(document: BatchDocument) -> dict:
    return {
        'id': document.id,
        'type': document.doc_type,
        'name': document.name,
        'url': document.url,
        'uploaded_at': document.uploaded_at,
    }


def _file_name_from_url(url: str) -> str:
    # '/media/uploads/x.pdf' or legacy '/uploads/x.pdf' -> 'uploads/x.pdf'
    name = (url or '').lstrip('/')
    if name.startswith('media/'):
        name = name[len('media/'):]
    return name


class ModelRecordStore(RecordStore):
    """
    Record store over the relational database.

    Records are plain dicts keyed by the models' attribute names
    (``farmer_id``, ``weight_kg``, ``harvest_date``). Batch records also carry
    their documents under ``docs``.
    """

    def _model(self, collection: str) -> type[models.Model]:
        self.check_collection(collection)
        return MODELS[collection]

    def _to_record(self, instance: models.Model) -> dict:
        record = {
            field.attname: getattr(instance, field.attname)
            for field in instance._meta.concrete_fields
        }
        if isinstance(instance, Batch):
            record['docs'] = [_document_to_record(d) for d in instance.documents.all()]
        return record

    def _queryset(self, collection: str):
        model = self._model(collection)
        queryset = model.objects.all()
        if model is Batch:
            queryset = queryset.prefetch_related('documents')
        return queryset

    def get(self, collection: str, record_id: str) -> Optional[dict]:
        instance = self._queryset(collection).filter(pk=record_id).first()
        return self._to_record(instance) if instance is not None else None

    def list(self, collection: str, **filters: Any) -> List[dict]:
        return [self._to_record(i) for i in self._queryset(collection).filter(**filters)]

    def batches_for_farmer(self, farmer_id: str) -> List[dict]:
        return self.list('batches', farmer_id=farmer_id)

    @transaction.atomic
    def insert(self, collection: str, record: dict) -> dict:
        model = self._model(collection)
        values = dict(record)
        docs = values.pop('docs', None) or []

        if values.get('id') is None:
            values.pop('id', None)

        instance = model.objects.create(**values)

        if model is Batch:
            for doc in docs:
                doc_type = doc.get('type')
                document = BatchDocument(
                    batch=instance,
                    doc_type=doc_type if doc_type in DocumentType.values else DocumentType.OTHER,
                    name=doc.get('name') or '',
                    file=_file_name_from_url(doc.get('url', '')),
                )
                if doc.get('id'):
                    document.id = doc['id']
                document.save(force_insert=True)

        logger.info("Inserted %s record %s", collection, instance.pk)
        return self.get(collection, instance.pk)

    @transaction.atomic
    def update(self, collection: str, record_id: str, **changes: Any) -> Optional[dict]:
        changes.pop('id', None)
        changes.pop('docs', None)
        updated = self._model(collection).objects.filter(pk=record_id).update(**changes)
        if not updated:
            return None
        return self.get(collection, record_id)
