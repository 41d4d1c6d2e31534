"""
Core Base Managers Module

Provides the queryset shared by tenant-owned models.

Exports:
    QuerySets:
        - OrganizationScopedQuerySet: in_organization(), filter_by_search_params()

Usage:
    from core.base.managers import OrganizationScopedQuerySet

    class CompetencyQuerySet(OrganizationScopedQuerySet):
        search_fields = ('name', 'description')

    class Competency(models.Model):
        objects = models.Manager.from_queryset(CompetencyQuerySet)()

        Competency.objects.in_organization(request.user.organization_id)
"""

from django.db import models
from django.db.models import Q


class OrganizationScopedQuerySet(models.QuerySet):
    """
    QuerySet for models carrying an ``organization`` foreign key.

    Attributes:
        search_fields: Fields matched (icontains) by the ``search`` parameter
    """
    search_fields = ()

    def in_organization(self, organization):
        """Restrict to one tenant. Accepts an Organization or its id."""
        organization_id = getattr(organization, 'pk', organization)
        return self.filter(organization_id=organization_id)

    def filter_by_search_params(self, query_params):
        """
        Apply the standard ``search`` filter from query parameters.

        Args:
            query_params: QueryDict or dict with optional key:
                - search: Contains match across ``search_fields``

        Returns:
            Filtered QuerySet
        """
        queryset = self

        search = query_params.get('search')
        if search and self.search_fields:
            condition = Q()
            for field in self.search_fields:
                condition |= Q(**{f'{field}__icontains': search})
            queryset = queryset.filter(condition)

        return queryset
