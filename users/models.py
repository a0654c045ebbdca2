from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from core.constants import AdminRole


class AdminManager(BaseUserManager):
    """Manager for email-based admin accounts"""
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("Admins must have an email address")
        email = self.normalize_email(email)
        admin = self.model(email=email, **extra_fields)
        admin.set_password(password)
        admin.save(using=self._db)
        return admin

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', AdminRole.ADMIN)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields['role'] = AdminRole.SUPER_ADMIN
        return self._create_user(email, password, **extra_fields)


class Admin(AbstractUser):
    """Back-office administrator - signs in with email"""
    username = None
    first_name = None
    last_name = None

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=AdminRole.choices, default=AdminRole.ADMIN)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AdminManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        ordering = ['-date_joined']
        verbose_name = "Admin"
        verbose_name_plural = "Admins"

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.get_role_display()})"

    @property
    def is_super_admin(self):
        return self.role == AdminRole.SUPER_ADMIN

    def save(self, *args, **kwargs):
        """Every admin may open the admin site; super admins get all permissions there"""
        self.is_staff = True
        self.is_superuser = self.role == AdminRole.SUPER_ADMIN
        super().save(*args, **kwargs)
