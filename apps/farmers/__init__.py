"""
Farmers App - Farmers, Kava Batches and Batch Documents

Farmers register, record harvested batches and upload the paperwork
(lab reports, invoices, packing lists) that export readiness depends on.

Key Components:
- Models: Farmer, Batch, BatchDocument
- Services: register_farmer, record_batch, attach_document
- API: /api/farmers/, /api/batches/
- Pages: /farmers/, /batches/new/, /batches/<id>/docs/
"""
