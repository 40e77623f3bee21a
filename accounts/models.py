from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager
from django.db import models
from django.utils import timezone
import uuid

ROLE_DEVELOPER = "developer"
ROLE_COLLECTOR = "collector"
ROLE_USER1 = "user1"
ROLE_USER2 = "user2"
ROLE_ADMIN = "admin"  # legacy, never assignable

ROLE_CHOICES = [
    (ROLE_DEVELOPER, "Developer"),
    (ROLE_COLLECTOR, "Collector"),
    (ROLE_USER1, "User group 1"),
    (ROLE_USER2, "User group 2"),
    (ROLE_ADMIN, "Admin (legacy)"),
]

# Roles that can be given to an account through the admin endpoints
ASSIGNABLE_ROLES = (ROLE_USER1, ROLE_USER2, ROLE_COLLECTOR, ROLE_DEVELOPER)
# Ordinary groups that partition visibility of files, folders and chat
ROLE_GROUPS = (ROLE_USER1, ROLE_USER2)
PRIVILEGED_ROLES = (ROLE_DEVELOPER, ROLE_COLLECTOR)


class CustomUserManager(UserManager):
    def create_user(self, username, password=None, role=ROLE_USER1, **extra_fields):
        if not username:
            raise ValueError("The username must be set")
        user = self.model(username=username, role=role, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        UserProfile.objects.get_or_create(user=user, defaults={"full_name": username})
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', ROLE_DEVELOPER)
        return self.create_user(username, password, **extra_fields)


class CustomUser(AbstractUser):
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER1)
    profile_picture = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    def __str__(self):
        return self.username

    @property
    def is_developer(self):
        return self.role == ROLE_DEVELOPER

    @property
    def is_collector(self):
        return self.role == ROLE_COLLECTOR

    @property
    def is_privileged(self):
        """Developers and collectors see every role group."""
        return self.role in PRIVILEGED_ROLES


class UserSessions(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='portal_sessions')
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()

    class Meta:
        indexes = [
            models.Index(fields=["user", "expires_at"], name="accounts_session_user_exp_idx"),
        ]

    def is_expired(self):
        return self.expires_at <= timezone.now()


class UserProfile(models.Model):
    user = models.OneToOneField(CustomUser, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=255, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Profile of {self.user.username}"
