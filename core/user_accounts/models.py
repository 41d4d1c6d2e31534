"""
User Account Models
Handles authentication identity, tenant membership and platform role.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models


class UserRole(models.TextChoices):
    """Platform roles. The role drives every evaluation access decision."""
    EMPLOYEE = 'EMPLOYEE', 'Employee'
    ASSESSOR = 'ASSESSOR', 'Assessor'
    HR = 'HR', 'HR'


class CustomUserManager(BaseUserManager):
    """
    Custom user manager for CustomUser model.
    Every user belongs to exactly one organization and holds one role.
    """

    def create_user(self, email, name, organization, password=None, role=UserRole.EMPLOYEE, **extra_fields):
        """
        Create and save a user.

        Args:
            email: User's email address (used for authentication)
            name: User's full name
            organization: Organization (tenant) the user belongs to
            password: User's password (will be hashed)
            role: One of UserRole values
            **extra_fields: Additional fields to set on the user

        Returns:
            CustomUser: The created user instance
        """
        if not email:
            raise ValueError('Email is required')
        if not name:
            raise ValueError('Name is required')
        if organization is None:
            raise ValueError('Organization is required')
        if role not in UserRole.values:
            raise ValueError(f'Invalid role: {role}')

        user = self.model(
            email=self.normalize_email(email),
            name=name,
            organization=organization,
            role=role,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, organization, password=None, **extra_fields):
        """
        Create an HR user.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(
            email=email,
            name=name,
            organization=organization,
            password=password,
            role=UserRole.HR,
            **extra_fields
        )

    def assessors_in(self, organization):
        """Active users holding the ASSESSOR role in an organization."""
        return self.filter(
            organization=organization,
            role=UserRole.ASSESSOR,
            is_active=True,
        ).order_by('id')


class CustomUser(AbstractBaseUser):
    """User with email authentication, scoped to one organization."""
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)

    organization = models.ForeignKey(
        'work_structures.Organization',
        on_delete=models.CASCADE,
        related_name='users',
        help_text="Tenant this user belongs to"
    )
    role = models.CharField(
        max_length=10,
        choices=UserRole.choices,
        default=UserRole.EMPLOYEE,
        db_index=True,
        help_text="Platform role (EMPLOYEE, ASSESSOR or HR)"
    )
    is_active = models.BooleanField(default=True)
    date_joined = models.DateTimeField(auto_now_add=True)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'custom_users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        indexes = [
            models.Index(fields=['organization', 'role'], name='user_org_role_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.email})"

    def is_employee(self):
        return self.role == UserRole.EMPLOYEE

    def is_assessor(self):
        return self.role == UserRole.ASSESSOR

    def is_hr(self):
        return self.role == UserRole.HR

    def belongs_to(self, organization_id):
        """True when the user is a member of the given organization."""
        return self.organization_id == organization_id
