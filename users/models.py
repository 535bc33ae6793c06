import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone

ROLE_FREE = "free"
ROLE_PAID = "paid"
ROLE_ADMIN = "admin"


def default_settings():
    return {"theme": "light", "fontSize": 14}


def normalize_email(email):
    return (email or "").strip().lower()


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        email = normalize_email(email)
        if not email:
            raise ValueError("An email address is required")
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_admin", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", ROLE_ADMIN)
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    ROLE_CHOICES = (
        (ROLE_FREE, "Free"),
        (ROLE_PAID, "Paid"),
        (ROLE_ADMIN, "Admin"),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, unique=True)
    is_admin = models.BooleanField(default=False)
    role = models.CharField(max_length=50, choices=ROLE_CHOICES, default=ROLE_FREE)
    settings = models.JSONField(default=default_settings)
    display_name = models.CharField(max_length=255, null=True, blank=True)
    photo_url = models.TextField(null=True, blank=True)
    temporary_premium_access = models.BooleanField(default=False)
    temporary_premium_expiry = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.email

    @property
    def is_staff(self):
        return self.is_admin

    def set_role(self, role):
        self.role = role
        self.is_admin = role == ROLE_ADMIN

    def has_temporary_premium(self, now=None):
        if not self.temporary_premium_access or self.temporary_premium_expiry is None:
            return False
        return (now or timezone.now()) < self.temporary_premium_expiry

    def effective_role(self, now=None):
        if self.is_admin or self.role == ROLE_ADMIN:
            return ROLE_ADMIN
        if self.role == ROLE_PAID or self.has_temporary_premium(now):
            return ROLE_PAID
        return ROLE_FREE

    def has_premium(self, now=None):
        return self.effective_role(now) in (ROLE_PAID, ROLE_ADMIN)

    def grant_temporary_premium(self, until):
        self.temporary_premium_access = True
        self.temporary_premium_expiry = until
