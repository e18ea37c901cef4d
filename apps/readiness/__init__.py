"""
Readiness App - Export Readiness Checklist

Decides whether a kava batch is ready for export and which documents a
destination asks for.

Key pieces:
- requirements: destination code -> ordered required documents
- normalization: batch records from any store -> one canonical mapping
- evaluator: fixed, ordered readiness checks and the overall verdict
- services: per-farmer readiness report read through a record store

The requirement table and the evaluator are pure; they never touch a store.
"""
