"""Business logic layer for s2files app.

This package contains all business logic for file operations:
- File upload, delete, lookup, listing and download URLs
- Roles and access policies
- Reconciliation of storage against metadata

All business logic should be implemented here, separate from
models (data layer) and infrastructure (external systems).
"""
