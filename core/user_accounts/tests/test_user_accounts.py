"""
Test suite for user_accounts app.
Tests the user manager, role predicates, role decorators and auth endpoints.
"""
from django.test import TestCase
from django.contrib.auth import get_user_model
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.test import APIClient, APIRequestFactory, force_authenticate
from rest_framework import status

from core.base.test_utils import create_organization, create_user
from core.user_accounts.decorators import require_role, require_role_for_methods
from core.user_accounts.models import UserRole


User = get_user_model()


class CustomUserManagerTest(TestCase):
    """Test CustomUserManager functionality"""

    def setUp(self):
        self.organization = create_organization("Acme")

    def test_create_user_success(self):
        """Test creating a regular user"""
        user = User.objects.create_user(
            email='Test@Example.com',
            name='Test User',
            organization=self.organization,
            password='TestPass123'
        )
        self.assertEqual(user.email, 'Test@example.com')
        self.assertEqual(user.role, UserRole.EMPLOYEE)
        self.assertTrue(user.is_active)
        self.assertTrue(user.check_password('TestPass123'))

    def test_create_superuser_is_hr(self):
        """Test createsuperuser path creates an HR user"""
        user = User.objects.create_superuser(
            email='hr@example.com',
            name='HR Admin',
            organization=self.organization,
            password='TestPass123'
        )
        self.assertTrue(user.is_hr())

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', name='No Email', organization=self.organization)

    def test_create_user_requires_organization(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='x@example.com', name='No Org', organization=None)

    def test_create_user_rejects_unknown_role(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(
                email='x@example.com', name='Bad Role', organization=self.organization, role='ADMIN'
            )

    def test_assessors_in_returns_active_assessors_of_one_organization(self):
        other = create_organization("Globex")
        first = create_user(self.organization, role=UserRole.ASSESSOR)
        second = create_user(self.organization, role=UserRole.ASSESSOR)
        inactive = create_user(self.organization, role=UserRole.ASSESSOR)
        inactive.is_active = False
        inactive.save()
        create_user(self.organization, role=UserRole.EMPLOYEE)
        create_user(other, role=UserRole.ASSESSOR)

        assessors = list(User.objects.assessors_in(self.organization))

        self.assertEqual(assessors, [first, second])


class RolePredicateTest(TestCase):
    """Test role helper methods"""

    def test_role_predicates(self):
        organization = create_organization()
        employee = create_user(organization, role=UserRole.EMPLOYEE)
        assessor = create_user(organization, role=UserRole.ASSESSOR)
        hr = create_user(organization, role=UserRole.HR)

        self.assertTrue(employee.is_employee())
        self.assertFalse(employee.is_assessor())
        self.assertTrue(assessor.is_assessor())
        self.assertTrue(hr.is_hr())
        self.assertTrue(hr.belongs_to(organization.pk))
        self.assertFalse(hr.belongs_to(organization.pk + 1))


@api_view(['GET'])
@require_role(UserRole.HR)
def hr_only_view(request):
    return Response({'ok': True})


@api_view(['GET', 'POST'])
@require_role_for_methods({'POST': (UserRole.HR,)})
def hr_writes_view(request):
    return Response({'ok': True})


class RoleDecoratorTest(TestCase):
    """Test require_role and require_role_for_methods"""

    def setUp(self):
        self.factory = APIRequestFactory()
        organization = create_organization()
        self.employee = create_user(organization, role=UserRole.EMPLOYEE)
        self.hr = create_user(organization, role=UserRole.HR)

    def test_require_role_allows_matching_role(self):
        request = self.factory.get('/')
        force_authenticate(request, user=self.hr)
        response = hr_only_view(request)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_require_role_rejects_other_roles(self):
        request = self.factory.get('/')
        force_authenticate(request, user=self.employee)
        response = hr_only_view(request)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_method_roles_leave_unlisted_methods_open(self):
        request = self.factory.get('/')
        force_authenticate(request, user=self.employee)
        response = hr_writes_view(request)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_method_roles_gate_listed_methods(self):
        request = self.factory.post('/', {}, format='json')
        force_authenticate(request, user=self.employee)
        response = hr_writes_view(request)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class AuthAPITest(TestCase):
    """Test login and profile endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.organization = create_organization("Acme")
        self.user = User.objects.create_user(
            email='assessor@example.com',
            name='Ada Assessor',
            organization=self.organization,
            password='TestPass123',
            role=UserRole.ASSESSOR,
        )

    def test_login_returns_tokens_and_role(self):
        response = self.client.post(
            '/auth/login/', {'email': 'assessor@example.com', 'password': 'TestPass123'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data['tokens'])
        self.assertIn('refresh', response.data['tokens'])
        self.assertEqual(response.data['user']['role'], UserRole.ASSESSOR)
        self.assertEqual(response.data['user']['organization_id'], self.organization.pk)

    def test_login_with_wrong_password(self):
        response = self.client.post(
            '/auth/login/', {'email': 'assessor@example.com', 'password': 'nope'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_access_token_authenticates_requests(self):
        response = self.client.post(
            '/auth/login/', {'email': 'assessor@example.com', 'password': 'TestPass123'}, format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['tokens']['access']}")

        response = self.client.get('/auth/me/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], 'assessor@example.com')
        self.assertEqual(response.data['organization_name'], 'Acme')

    def test_me_requires_authentication(self):
        response = self.client.get('/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
