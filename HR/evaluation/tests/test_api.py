"""
API Tests for the evaluation endpoints.
"""
from django.core import mail
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from core.base.test_utils import (
    create_organization,
    create_employee,
    create_assessor,
    create_hr,
    results_of,
)
from HR.evaluation.models import (
    AppraisalQuestion,
    AssessorAssignment,
    Competency,
    EvaluationInstance,
    EvaluationKind,
    EvaluationStatus,
    EvaluationType,
)

BASE = '/hr/evaluation'


class EvaluationAPITestBase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.org = create_organization("Acme")
        self.hr = create_hr(self.org)
        self.employee = create_employee(self.org)
        self.assessor = create_assessor(self.org)
        self.competency = Competency.objects.create(organization=self.org, name="Communication")

    def as_user(self, user):
        self.client.force_authenticate(user=user)

    def create_self_evaluation(self, kind=EvaluationKind.COMPETENCY):
        self.as_user(self.employee)
        response = self.client.post(
            f'{BASE}/evaluations/self/', {'kind': kind, 'cycle': '2025'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        return response.data['id']


class EvaluationLifecycleAPITest(EvaluationAPITestBase):
    """Test creation and transitions over HTTP"""

    def test_create_self_evaluation_then_fetch_existing(self):
        evaluation_id = self.create_self_evaluation()

        response = self.client.post(
            f'{BASE}/evaluations/self/', {'kind': 'COMPETENCY', 'cycle': '2025'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['id'], evaluation_id)
        self.assertEqual(response.data['type'], EvaluationType.SELF)
        self.assertEqual(response.data['status'], EvaluationStatus.PENDING)
        self.assertEqual(response.data['employee_id'], self.employee.pk)
        self.assertIsNone(response.data['assessor_id'])

    def test_create_self_rejects_unknown_kind(self):
        self.as_user(self.employee)
        response = self.client.post(f'{BASE}/evaluations/self/', {'kind': 'QUIZ'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_hr_creates_assessor_evaluation(self):
        self.as_user(self.hr)
        response = self.client.post(
            f'{BASE}/evaluations/assessor/',
            {
                'employee_id': self.employee.pk,
                'assessor_id': self.assessor.pk,
                'kind': 'COMPETENCY',
                'cycle': '2025',
            },
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['assessor_id'], self.assessor.pk)

    def test_hr_assessor_evaluation_needs_assessor(self):
        self.as_user(self.hr)
        response = self.client.post(
            f'{BASE}/evaluations/assessor/',
            {'employee_id': self.employee.pk, 'kind': 'COMPETENCY'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_start_then_complete_fans_out_and_emails_assessors(self):
        second_assessor = create_assessor(self.org)
        evaluation_id = self.create_self_evaluation()

        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/start/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], EvaluationStatus.IN_PROGRESS)

        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], EvaluationStatus.COMPLETED)
        self.assertEqual(response.data['assessor_evaluations_created'], 2)

        self.assertEqual(len(mail.outbox), 2)
        recipients = sorted(message.to[0] for message in mail.outbox)
        self.assertEqual(recipients, sorted([self.assessor.email, second_assessor.email]))
        self.assertIn('/evaluations/', mail.outbox[0].body)

    def test_second_complete_sends_no_more_mail(self):
        evaluation_id = self.create_self_evaluation()
        self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')
        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')

        self.assertEqual(response.data['assessor_evaluations_created'], 0)
        self.assertEqual(len(mail.outbox), 1)

    @override_settings(EVALUATION_NOTIFY_ASSESSORS=False)
    def test_notifications_can_be_switched_off(self):
        evaluation_id = self.create_self_evaluation()
        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')

        self.assertEqual(response.data['assessor_evaluations_created'], 1)
        self.assertEqual(len(mail.outbox), 0)

    def test_status_endpoint_dispatches_transitions(self):
        evaluation_id = self.create_self_evaluation()

        response = self.client.put(
            f'{BASE}/evaluations/{evaluation_id}/status/', {'status': 'COMPLETED'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], EvaluationStatus.COMPLETED)

        self.as_user(self.hr)
        response = self.client.put(
            f'{BASE}/evaluations/{evaluation_id}/status/', {'status': 'REVIEWED'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], EvaluationStatus.REVIEWED)
        self.assertIsNotNone(response.data['reviewed_at'])

    def test_status_back_to_pending_is_conflict(self):
        evaluation_id = self.create_self_evaluation()
        response = self.client.put(
            f'{BASE}/evaluations/{evaluation_id}/status/', {'status': 'PENDING'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['status'], 'error')
        self.assertEqual(response.data['data']['code'], 'invalid_transition')

    def test_review_before_completion_is_conflict(self):
        evaluation_id = self.create_self_evaluation()
        self.as_user(self.hr)
        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/review/')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['data']['code'], 'invalid_transition')


class EvaluationErrorAPITest(EvaluationAPITestBase):
    """Test that not found, forbidden and conflict are distinguishable"""

    def test_missing_evaluation_is_404(self):
        self.as_user(self.employee)
        response = self.client.get(f'{BASE}/evaluations/999999/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['data']['code'], 'not_found')

    def test_other_organization_is_404(self):
        evaluation_id = self.create_self_evaluation()
        outsider = create_hr(create_organization("Globex"))
        self.as_user(outsider)

        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/start/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['data']['code'], 'not_found')

    def test_colleague_is_403(self):
        evaluation_id = self.create_self_evaluation()
        self.as_user(create_employee(self.org))

        response = self.client.post(f'{BASE}/evaluations/{evaluation_id}/start/')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['data']['code'], 'forbidden')
        self.assertEqual(
            EvaluationInstance.objects.get(pk=evaluation_id).status, EvaluationStatus.PENDING
        )

    def test_unauthenticated_request_is_rejected(self):
        response = self.client.get(f'{BASE}/evaluations/')
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))


class EvaluationListAPITest(EvaluationAPITestBase):
    """Test role-scoped, paginated listing"""

    def test_employee_list_is_paginated_and_scoped(self):
        own_id = self.create_self_evaluation()
        colleague = create_employee(self.org)
        EvaluationInstance.objects.create(
            organization=self.org, type=EvaluationType.SELF, kind=EvaluationKind.COMPETENCY,
            employee=colleague, cycle='2025',
        )

        response = self.client.get(f'{BASE}/evaluations/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['count'], 1)
        self.assertEqual([item['id'] for item in results_of(response)], [own_id])

    def test_hr_filters_by_type(self):
        evaluation_id = self.create_self_evaluation()
        self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')

        self.as_user(self.hr)
        response = self.client.get(f'{BASE}/evaluations/', {'type': 'ASSESSOR'})

        results = results_of(response)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0]['assessor_id'], self.assessor.pk)
        self.assertEqual(results[0]['status'], EvaluationStatus.PENDING)


class RatingAPITest(EvaluationAPITestBase):
    """Test rating submission and listing"""

    def test_submit_and_correct_competency_rating(self):
        evaluation_id = self.create_self_evaluation()
        url = f'{BASE}/evaluations/{evaluation_id}/ratings/'

        response = self.client.post(url, {'competency_id': self.competency.pk, 'rating': 3}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['competency_name'], "Communication")

        self.client.post(url, {'competency_id': self.competency.pk, 'rating': 5}, format='json')
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['rating'], 5)

    def test_out_of_range_rating_is_400(self):
        evaluation_id = self.create_self_evaluation()
        response = self.client.post(
            f'{BASE}/evaluations/{evaluation_id}/ratings/',
            {'competency_id': self.competency.pk, 'rating': 6},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_rating_needs_a_target(self):
        evaluation_id = self.create_self_evaluation()
        response = self.client.post(
            f'{BASE}/evaluations/{evaluation_id}/ratings/', {'rating': 3}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_rating_after_completion_is_conflict(self):
        evaluation_id = self.create_self_evaluation()
        self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')

        response = self.client.post(
            f'{BASE}/evaluations/{evaluation_id}/ratings/',
            {'competency_id': self.competency.pk, 'rating': 3},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_appraisal_response_upsert_returns_200_on_second_write(self):
        evaluation_id = self.create_self_evaluation(kind=EvaluationKind.APPRAISAL)
        response = self.client.get(f'{BASE}/questions/')
        question_id = response.data[0]['id']
        url = f'{BASE}/evaluations/{evaluation_id}/ratings/'

        first = self.client.post(url, {'question_id': question_id, 'rating': 2}, format='json')
        second = self.client.post(
            url, {'question_id': question_id, 'rating': 4, 'comment': 'Better'}, format='json'
        )

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertEqual(second.data['employee_rating'], 4)

        response = self.client.get(f'{BASE}/evaluations/{evaluation_id}/responses/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['employee_comment'], 'Better')


class CatalogueAPITest(EvaluationAPITestBase):
    """Test competencies and appraisal questions"""

    def test_questions_are_seeded_on_first_access(self):
        self.as_user(self.employee)
        response = self.client.get(f'{BASE}/questions/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 20)
        self.assertEqual(AppraisalQuestion.objects.filter(organization=self.org).count(), 20)

        self.client.get(f'{BASE}/questions/')
        self.assertEqual(AppraisalQuestion.objects.filter(organization=self.org).count(), 20)

    def test_hr_adds_competency(self):
        self.as_user(self.hr)
        response = self.client.post(
            f'{BASE}/competencies/', {'name': 'Delivery', 'description': 'Ships work'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.get(f'{BASE}/competencies/')
        self.assertEqual([item['name'] for item in results_of(response)], ['Communication', 'Delivery'])

    def test_duplicate_competency_is_400(self):
        self.as_user(self.hr)
        response = self.client.post(f'{BASE}/competencies/', {'name': 'communication'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_employee_cannot_add_competency(self):
        self.as_user(self.employee)
        response = self.client.post(f'{BASE}/competencies/', {'name': 'Delivery'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class AssignmentAPITest(EvaluationAPITestBase):
    """Test assessor assignment management"""

    def test_hr_creates_updates_and_deletes_assignment(self):
        self.as_user(self.hr)
        response = self.client.post(
            f'{BASE}/assignments/',
            {'assessor_id': self.assessor.pk, 'employee_id': self.employee.pk},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        assignment_id = response.data['id']

        other_assessor = create_assessor(self.org)
        response = self.client.patch(
            f'{BASE}/assignments/{assignment_id}/', {'assessor_id': other_assessor.pk}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['assessor_id'], other_assessor.pk)

        response = self.client.delete(f'{BASE}/assignments/{assignment_id}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(AssessorAssignment.objects.exists())

    def test_duplicate_assignment_is_400(self):
        AssessorAssignment.objects.create(organization=self.org, assessor=self.assessor, employee=self.employee)
        self.as_user(self.hr)
        response = self.client.post(
            f'{BASE}/assignments/',
            {'assessor_id': self.assessor.pk, 'employee_id': self.employee.pk},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_assessor_cannot_create_assignment(self):
        self.as_user(self.assessor)
        response = self.client.post(
            f'{BASE}/assignments/',
            {'assessor_id': self.assessor.pk, 'employee_id': self.employee.pk},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_assessor_lists_own_assignments(self):
        AssessorAssignment.objects.create(organization=self.org, assessor=self.assessor, employee=self.employee)
        other_assessor = create_assessor(self.org)
        AssessorAssignment.objects.create(
            organization=self.org, assessor=other_assessor, employee=create_employee(self.org)
        )

        self.as_user(self.assessor)
        response = self.client.get(f'{BASE}/assignments/')

        results = results_of(response)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0]['employee_id'], self.employee.pk)

    def test_hr_filters_assignments_by_employee(self):
        AssessorAssignment.objects.create(organization=self.org, assessor=self.assessor, employee=self.employee)
        AssessorAssignment.objects.create(
            organization=self.org, assessor=self.assessor, employee=create_employee(self.org)
        )

        self.as_user(self.hr)
        response = self.client.get(f'{BASE}/assignments/', {'employee_id': self.employee.pk})

        results = results_of(response)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0]['employee_id'], self.employee.pk)

    def test_non_numeric_assignment_filter_is_400(self):
        self.as_user(self.hr)
        response = self.client.get(f'{BASE}/assignments/', {'assessor_id': 'abc'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('assessor_id', response.data)


class GapAnalysisAPITest(EvaluationAPITestBase):

    def test_gap_report_over_http(self):
        evaluation_id = self.create_self_evaluation()
        self.client.post(
            f'{BASE}/evaluations/{evaluation_id}/ratings/',
            {'competency_id': self.competency.pk, 'rating': 2},
            format='json'
        )
        self.client.post(f'{BASE}/evaluations/{evaluation_id}/complete/')

        self.as_user(self.assessor)
        assessor_evaluation = EvaluationInstance.objects.get(assessor=self.assessor)
        self.client.post(
            f'{BASE}/evaluations/{assessor_evaluation.pk}/ratings/',
            {'competency_id': self.competency.pk, 'rating': 4},
            format='json'
        )
        self.client.post(f'{BASE}/evaluations/{assessor_evaluation.pk}/complete/')

        self.as_user(self.hr)
        response = self.client.get(f'{BASE}/analytics/gap/', {'granularity': 'employee'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        row = response.data['groups'][0]['rows'][0]
        self.assertEqual(row['dimension'], 'Communication')
        self.assertEqual(row['gap'], 2.0)

    def test_unknown_granularity_is_400(self):
        self.as_user(self.hr)
        response = self.client.get(f'{BASE}/analytics/gap/', {'granularity': 'planet'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
