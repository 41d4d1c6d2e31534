"""
Service tests for competency ratings and appraisal responses.
"""
from django.core.exceptions import ValidationError
from django.test import TestCase

from core.base.test_utils import (
    create_organization,
    create_employee,
    create_assessor,
)
from HR.evaluation.dtos import (
    AssessorEvaluationCreateDTO,
    RatingSubmitDTO,
    SelfEvaluationCreateDTO,
)
from HR.evaluation.exceptions import EvaluationForbidden, InvalidTransition
from HR.evaluation.models import (
    AssessorAssignment,
    Competency,
    EvaluationKind,
    QuestionResponse,
    RatingEntry,
)
from HR.evaluation.services import (
    AppraisalQuestionService,
    AppraisalResponseStore,
    CompetencyRatingStore,
    EvaluationLifecycleService,
    RatingService,
)


class CompetencyRatingTest(TestCase):
    """Test competency rating submission"""

    def setUp(self):
        self.org = create_organization("Acme")
        self.employee = create_employee(self.org)
        self.competency = Competency.objects.create(organization=self.org, name="Communication")
        self.evaluation, _ = EvaluationLifecycleService.create_self(
            self.employee, SelfEvaluationCreateDTO(kind=EvaluationKind.COMPETENCY, cycle='2025')
        )

    def _submit(self, rating, competency_id=None, comment=''):
        dto = RatingSubmitDTO(
            evaluation_id=self.evaluation.pk,
            rating=rating,
            competency_id=competency_id or self.competency.pk,
            comment=comment,
        )
        return RatingService.submit(self.employee, dto)

    def test_ratings_within_range_are_accepted(self):
        for rating in range(1, 6):
            entry, created = self._submit(rating)
            self.assertTrue(created)
            self.assertEqual(entry.rating, rating)
        self.assertEqual(RatingEntry.objects.count(), 5)

    def test_ratings_outside_range_are_rejected(self):
        for rating in (0, 6, -1, 10):
            with self.assertRaises(ValidationError):
                self._submit(rating)
        self.assertEqual(RatingEntry.objects.count(), 0)

    def test_non_integer_rating_is_rejected(self):
        with self.assertRaises(ValidationError):
            CompetencyRatingStore.record_rating(self.evaluation, self.competency, 3.5)
        with self.assertRaises(ValidationError):
            CompetencyRatingStore.record_rating(self.evaluation, self.competency, True)

    def test_corrections_append_and_latest_wins(self):
        self._submit(2)
        self._submit(4, comment="Revised")

        self.assertEqual(RatingEntry.objects.count(), 2)
        latest = CompetencyRatingStore.latest_ratings([self.evaluation.pk])
        self.assertEqual(latest, {(self.evaluation.pk, self.competency.pk): 4})

        _, entries = RatingService.list_ratings(self.employee, self.evaluation.pk)
        self.assertEqual([entry.rating for entry in entries], [4])
        self.assertEqual(entries[0].comment, "Revised")

    def test_competency_of_other_organization_is_rejected(self):
        foreign = Competency.objects.create(organization=create_organization("Globex"), name="Sales")
        with self.assertRaises(ValidationError):
            self._submit(3, competency_id=foreign.pk)

    def test_rating_a_completed_evaluation_is_invalid(self):
        EvaluationLifecycleService.complete(self.employee, self.evaluation.pk)
        with self.assertRaises(InvalidTransition):
            self._submit(3)

    def test_other_employee_cannot_rate(self):
        other = create_employee(self.org)
        with self.assertRaises(EvaluationForbidden):
            RatingService.submit(
                other,
                RatingSubmitDTO(evaluation_id=self.evaluation.pk, rating=3, competency_id=self.competency.pk)
            )


class AppraisalResponseTest(TestCase):
    """The employee and the assessor share one response row per question."""

    def setUp(self):
        self.org = create_organization("Acme")
        self.employee = create_employee(self.org)
        self.assessor = create_assessor(self.org)
        AssessorAssignment.objects.create(organization=self.org, assessor=self.assessor, employee=self.employee)
        AppraisalQuestionService.ensure_default_questions(self.org)
        self.question = AppraisalQuestionService.list_questions(self.org).first()
        self.self_appraisal, _ = EvaluationLifecycleService.create_self(
            self.employee, SelfEvaluationCreateDTO(kind=EvaluationKind.APPRAISAL, cycle='2025')
        )

    def _rate(self, user, evaluation, rating, comment=''):
        return RatingService.submit(
            user,
            RatingSubmitDTO(evaluation_id=evaluation.pk, rating=rating, question_id=self.question.pk, comment=comment)
        )

    def test_round_trip_keeps_both_sides(self):
        response, created = self._rate(self.employee, self.self_appraisal, 4, "I did well")
        self.assertTrue(created)

        _, fanned_out = EvaluationLifecycleService.complete(self.employee, self.self_appraisal.pk)
        assessor_appraisal = fanned_out[0]

        response, created = self._rate(self.assessor, assessor_appraisal, 5, "Agreed, even better")
        self.assertFalse(created)

        self.assertEqual(QuestionResponse.objects.count(), 1)
        response.refresh_from_db()
        self.assertEqual(response.evaluation_id, self.self_appraisal.pk)
        self.assertEqual(response.employee_rating, 4)
        self.assertEqual(response.assessor_rating, 5)

    def test_employee_rewrite_leaves_assessor_side_untouched(self):
        self._rate(self.employee, self.self_appraisal, 4)
        response, _ = AppraisalResponseStore.upsert_response(
            self.self_appraisal, self.question, 'ASSESSOR', 5, "Strong"
        )
        response, _ = AppraisalResponseStore.upsert_response(
            self.self_appraisal, self.question, 'EMPLOYEE', 2, "Second thoughts"
        )

        response.refresh_from_db()
        self.assertEqual(response.employee_rating, 2)
        self.assertEqual(response.employee_comment, "Second thoughts")
        self.assertEqual(response.assessor_rating, 5)
        self.assertEqual(response.assessor_comment, "Strong")

    def test_assessor_appraisal_without_self_appraisal_is_rejected(self):
        lonely = create_employee(self.org)
        AssessorAssignment.objects.create(organization=self.org, assessor=self.assessor, employee=lonely)
        assessor_appraisal, _ = EvaluationLifecycleService.create_assessor(
            self.assessor,
            AssessorEvaluationCreateDTO(employee_id=lonely.pk, kind=EvaluationKind.APPRAISAL, cycle='2025')
        )

        with self.assertRaises(ValidationError):
            self._rate(self.assessor, assessor_appraisal, 3)

    def test_list_responses_from_assessor_side_reads_shared_rows(self):
        self._rate(self.employee, self.self_appraisal, 3)
        _, fanned_out = EvaluationLifecycleService.complete(self.employee, self.self_appraisal.pk)

        responses = RatingService.list_responses(self.assessor, fanned_out[0].pk)

        self.assertEqual(len(responses), 1)
        self.assertEqual(responses[0].employee_rating, 3)
        self.assertIsNone(responses[0].assessor_rating)

    def test_list_responses_rejects_competency_evaluation(self):
        competency_evaluation, _ = EvaluationLifecycleService.create_self(
            self.employee, SelfEvaluationCreateDTO(kind=EvaluationKind.COMPETENCY, cycle='2025')
        )
        with self.assertRaises(ValidationError):
            RatingService.list_responses(self.employee, competency_evaluation.pk)
