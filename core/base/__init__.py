"""
Core Base Module

Shared abstract model mixins and querysets.

Exports:
    core.base.models:
        - TimeStampedMixin: Adds created_at, updated_at
        - AuditMixin: TimeStampedMixin plus created_by, updated_by
    core.base.managers:
        - OrganizationScopedQuerySet: Tenant filtering and search

Usage:
    from core.base.models import AuditMixin

    class AssessorAssignment(AuditMixin):
        ...

Models are imported from core.base.models directly to avoid
AppRegistryNotReady errors at package import time.
"""
