"""
Rating gap analytics.

Compares what employees report about themselves with what assessors report
about them, per competency or appraisal question.

    gap = assessor average - self average

A positive gap means the employee under-rates themselves.
"""
from collections import OrderedDict
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

from django.core.exceptions import ValidationError

from HR.evaluation.dtos import GapAnalysisQueryDTO
from HR.evaluation.models import (
    Competency,
    EvaluationInstance,
    EvaluationKind,
    EvaluationType,
    QuestionResponse,
)
from .catalogue_service import AppraisalQuestionService
from .directory_service import DirectoryService
from .lifecycle_service import EvaluationLifecycleService
from .rating_service import CompetencyRatingStore

ORGANIZATION = 'organization'
DEPARTMENT = 'department'
JOB = 'job'
EMPLOYEE = 'employee'
INSTANCE = 'instance'

GRANULARITIES = (ORGANIZATION, DEPARTMENT, JOB, EMPLOYEE, INSTANCE)

UNASSIGNED = 'Unassigned'


def _quantize(value) -> float:
    return float(Decimal(str(value)).quantize(Decimal('0.01')))


def _average(values: Sequence[int]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def summarize_gaps(dimensions: Sequence[Tuple[int, str]],
                   self_ratings: Dict[int, List[int]],
                   assessor_ratings: Dict[int, List[int]]) -> List[dict]:
    """
    Reduce raw ratings to one gap row per dimension.

    Args:
        dimensions: (id, name) pairs in catalogue order
        self_ratings: dimension id -> ratings given by employees
        assessor_ratings: dimension id -> ratings given by assessors

    Returns:
        Rows ordered by absolute gap, largest first. Equal gaps keep catalogue
        order. A side without ratings averages to 0.0.
    """
    rows = []
    for dimension_id, name in dimensions:
        self_values = self_ratings.get(dimension_id, [])
        assessor_values = assessor_ratings.get(dimension_id, [])
        self_avg = _average(self_values)
        assessor_avg = _average(assessor_values)
        rows.append({
            'dimension_id': dimension_id,
            'dimension': name,
            'self_avg': _quantize(self_avg),
            'assessor_avg': _quantize(assessor_avg),
            'gap': _quantize(assessor_avg - self_avg),
            'self_count': len(self_values),
            'assessor_count': len(assessor_values),
            'count': len(self_values) + len(assessor_values),
        })

    # sorted() is stable
    return sorted(rows, key=lambda row: -abs(row['gap']))


class GapAnalysisService:
    """
    Builds gap reports over finished evaluations the caller can see.

    Population: COMPLETED or REVIEWED evaluations of one kind, visible to the
    caller, optionally narrowed by employee, department, job, cycle or a
    single evaluation round.

    Granularity decides how the population is grouped:
    - organization: one group
    - department / job: by the employee's current job; employees without a
      job fall into "Unassigned"
    - employee: per employee
    - instance: per evaluation round (employee and cycle), i.e. a SELF
      evaluation together with its ASSESSOR counterparts
    """

    @classmethod
    def compute(cls, user, dto: GapAnalysisQueryDTO) -> dict:
        if dto.kind not in EvaluationKind.values:
            raise ValidationError({'kind': f'Must be one of {", ".join(EvaluationKind.values)}'})
        if dto.granularity not in GRANULARITIES:
            raise ValidationError({'granularity': f'Must be one of {", ".join(GRANULARITIES)}'})

        population = cls._population(user, dto)
        jobs = DirectoryService.current_jobs(evaluation.employee_id for evaluation in population)

        if dto.department_id is not None:
            population = [
                evaluation for evaluation in population
                if cls._department_id(jobs.get(evaluation.employee_id)) == dto.department_id
            ]
        if dto.job_id is not None:
            population = [
                evaluation for evaluation in population
                if getattr(jobs.get(evaluation.employee_id), 'pk', None) == dto.job_id
            ]

        groups = OrderedDict()
        for evaluation in population:
            key, label = cls._group_key(dto.granularity, evaluation, jobs)
            groups.setdefault(key, {'key': key, 'label': label, 'evaluations': []})
            groups[key]['evaluations'].append(evaluation)

        dimensions = cls._dimensions(user.organization, dto.kind)
        results = []
        for group in groups.values():
            evaluations = group['evaluations']
            if dto.kind == EvaluationKind.COMPETENCY:
                self_ratings, assessor_ratings = cls._competency_ratings(evaluations)
            else:
                self_ratings, assessor_ratings = cls._appraisal_ratings(evaluations)
            results.append({
                'key': group['key'],
                'label': group['label'],
                'evaluation_count': len(evaluations),
                'rows': summarize_gaps(dimensions, self_ratings, assessor_ratings),
            })

        return {
            'kind': dto.kind,
            'granularity': dto.granularity,
            'groups': results,
        }

    # ----------------------
    # Population
    # ----------------------

    @staticmethod
    def _population(user, dto: GapAnalysisQueryDTO) -> List[EvaluationInstance]:
        queryset = EvaluationInstance.objects.visible_to(user).finished().of_kind(dto.kind).with_people()

        if dto.employee_id is not None:
            queryset = queryset.filter(employee_id=dto.employee_id)
        if dto.cycle:
            queryset = queryset.filter(cycle=dto.cycle)
        if dto.evaluation_id is not None:
            anchor = EvaluationLifecycleService.get_for_user(user, dto.evaluation_id)
            queryset = queryset.filter(employee_id=anchor.employee_id, cycle=anchor.cycle)

        return list(queryset.order_by('employee_id', 'cycle', 'id'))

    @staticmethod
    def _department_id(job):
        if job is None:
            return None
        return job.department_id

    @classmethod
    def _group_key(cls, granularity, evaluation, jobs):
        if granularity == ORGANIZATION:
            return f"organization:{evaluation.organization_id}", evaluation.organization.name

        if granularity == EMPLOYEE:
            return f"employee:{evaluation.employee_id}", evaluation.employee.name

        if granularity == INSTANCE:
            return (
                f"instance:{evaluation.employee_id}:{evaluation.cycle}",
                f"{evaluation.employee.name} ({evaluation.cycle})",
            )

        job = jobs.get(evaluation.employee_id)
        if granularity == JOB:
            if job is None:
                return "job:none", UNASSIGNED
            return f"job:{job.pk}", job.title

        if job is None or job.department is None:
            return "department:none", UNASSIGNED
        return f"department:{job.department_id}", job.department.name

    # ----------------------
    # Ratings
    # ----------------------

    @staticmethod
    def _dimensions(organization, kind) -> List[Tuple[int, str]]:
        if kind == EvaluationKind.COMPETENCY:
            return list(
                Competency.objects.in_organization(organization).order_by('id').values_list('id', 'name')
            )
        AppraisalQuestionService.ensure_default_questions(organization)
        return [
            (question.pk, question.title)
            for question in AppraisalQuestionService.list_questions(organization)
        ]

    @staticmethod
    def _competency_ratings(evaluations):
        latest = CompetencyRatingStore.latest_ratings(evaluation.pk for evaluation in evaluations)
        types = {evaluation.pk: evaluation.type for evaluation in evaluations}

        self_ratings, assessor_ratings = {}, {}
        for (evaluation_id, competency_id), rating in latest.items():
            target = self_ratings if types[evaluation_id] == EvaluationType.SELF else assessor_ratings
            target.setdefault(competency_id, []).append(rating)
        return self_ratings, assessor_ratings

    @staticmethod
    def _appraisal_ratings(evaluations):
        self_anchor_ids = {evaluation.pk for evaluation in evaluations if evaluation.is_self()}

        # Assessor answers live on the employee's SELF appraisal for the cycle
        assessor_rounds = {
            (evaluation.employee_id, evaluation.cycle)
            for evaluation in evaluations if not evaluation.is_self()
        }
        assessor_anchor_ids = set()
        if assessor_rounds:
            first = evaluations[0]
            candidates = EvaluationInstance.objects.self_evaluations().filter(
                organization_id=first.organization_id,
                kind=EvaluationKind.APPRAISAL,
                employee_id__in={employee_id for employee_id, _ in assessor_rounds},
            ).values_list('id', 'employee_id', 'cycle')
            assessor_anchor_ids = {
                anchor_id for anchor_id, employee_id, cycle in candidates
                if (employee_id, cycle) in assessor_rounds
            }

        self_ratings, assessor_ratings = {}, {}
        responses = QuestionResponse.objects.filter(
            evaluation_id__in=self_anchor_ids | assessor_anchor_ids
        ).values_list('evaluation_id', 'question_id', 'employee_rating', 'assessor_rating')

        for evaluation_id, question_id, employee_rating, assessor_rating in responses:
            if evaluation_id in self_anchor_ids and employee_rating is not None:
                self_ratings.setdefault(question_id, []).append(employee_rating)
            if evaluation_id in assessor_anchor_ids and assessor_rating is not None:
                assessor_ratings.setdefault(question_id, []).append(assessor_rating)
        return self_ratings, assessor_ratings
