"""Infrastructure layer for s2files app.

This package contains integrations with external systems:
- S3-compatible storage backend (MinIO/R2)
- Upload payload decoding and object key generation

Keep infrastructure concerns separate from business logic.
"""
