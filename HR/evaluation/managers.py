"""
Evaluation querysets.

Access rules live in HR.evaluation.access; ``visible_to`` applies the same
rules as a database filter.
"""
from django.db import models

from core.base.managers import OrganizationScopedQuerySet


class EvaluationInstanceQuerySet(OrganizationScopedQuerySet):
    search_fields = ('employee__name', 'assessor__name', 'cycle')

    def visible_to(self, user):
        """Instances ``user`` may see, scoped to the user's organization."""
        from HR.evaluation.access import visible_q
        return self.filter(visible_q(user))

    def finished(self):
        """COMPLETED or REVIEWED instances."""
        from HR.evaluation.models import FINISHED_STATUSES
        return self.filter(status__in=FINISHED_STATUSES)

    def of_kind(self, kind):
        return self.filter(kind=kind)

    def self_evaluations(self):
        from HR.evaluation.models import EvaluationType
        return self.filter(type=EvaluationType.SELF)

    def assessor_evaluations(self):
        from HR.evaluation.models import EvaluationType
        return self.filter(type=EvaluationType.ASSESSOR)

    def with_people(self):
        return self.select_related('organization', 'employee', 'assessor')


class EvaluationInstanceManager(models.Manager.from_queryset(EvaluationInstanceQuerySet)):
    """
    Manager for EvaluationInstance.

    Usage:
        EvaluationInstance.objects.visible_to(request.user).finished()
    """
    pass
