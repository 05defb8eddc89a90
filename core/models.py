from django.db import models
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.utils.translation import gettext_lazy as _
from django.utils import timezone


# Enums as TextChoices
class UserRole(models.TextChoices):
    STUDENT = 'student', _('Student')
    ORGANIZATION = 'organization', _('Organization')
    ADMIN = 'admin', _('Admin')


class EnrollmentStatus(models.TextChoices):
    ACTIVE = 'active', _('Active')
    INACTIVE = 'inactive', _('Inactive')


# Custom User Manager
class UserManager(BaseUserManager):
    def create_user(self, username, email, password=None, **extra_fields):
        if not username:
            raise ValueError(_('The Username must be set'))
        if not email:
            raise ValueError(_('The Email must be set'))

        email = self.normalize_email(email)
        user = self.model(username=username, email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('active', True)
        extra_fields.setdefault('role', UserRole.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError(_('Superuser must have is_staff=True.'))
        if extra_fields.get('is_superuser') is not True:
            raise ValueError(_('Superuser must have is_superuser=True.'))

        return self.create_user(username, email, password, **extra_fields)


# Models
class User(AbstractBaseUser, PermissionsMixin):
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255, blank=True)
    role = models.CharField(max_length=20, choices=UserRole.choices, default=UserRole.STUDENT)
    active = models.BooleanField(default=True)

    # Student profile fields
    roll_number = models.CharField(max_length=50, unique=True, null=True, blank=True)
    course = models.CharField(max_length=255, blank=True)
    year = models.CharField(max_length=50, blank=True)

    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['email', 'name']

    class Meta:
        ordering = ['username']

    def __str__(self):
        return f"{self.name} ({self.username})"

    @property
    def is_organization(self):
        return self.role == UserRole.ORGANIZATION


class OrganizationStudent(models.Model):
    organization = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name='organization_students',
        limit_choices_to={'role': UserRole.ORGANIZATION}
    )
    student = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name='student_organizations',
        limit_choices_to={'role': UserRole.STUDENT}
    )
    roll_number = models.CharField(max_length=50, blank=True)
    course = models.CharField(max_length=255, blank=True)
    year = models.CharField(max_length=50, blank=True)
    status = models.CharField(max_length=20, choices=EnrollmentStatus.choices, default=EnrollmentStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['organization', 'student'], name='unique_organization_student'),
        ]
        ordering = ['organization', 'roll_number']

    def __str__(self):
        return f"{self.student.username} - {self.organization.name}"
