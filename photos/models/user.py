"""Custom user model doubling as the public profile, with cached follow counters."""

from django.core.validators import RegexValidator, MaxLengthValidator
from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar

from photos.utils.ids import new_id

USERNAME_PATTERN = r'^\w{3,30}$'


class User(AbstractUser):
    """Profile of a person who uploads, rates and follows."""

    id = models.UUIDField(primary_key=True, default=new_id, editable=False)
    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=USERNAME_PATTERN,
            message='Username must consist of at least three alphanumericals'
        )]
    )
    # Subject id issued by the identity provider; null for local accounts.
    auth_uid = models.CharField(max_length=128, unique=True, null=True, blank=True)
    display_name = models.CharField(max_length=100, blank=True)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    avatar_url = models.CharField(max_length=500, blank=True)

    # Denormalized; maintained by FollowService on every edge mutation.
    followers_count = models.PositiveIntegerField(default=0)
    following_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def name(self):
        """Display name, falling back to the username."""
        return self.display_name or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email or self.username)
        return gravatar_object.get_image(size=size, default='mp')

    def avatar_or_gravatar(self, size=120):
        """Return the stored avatar reference or a gravatar fallback."""
        if self.avatar_url:
            return self.avatar_url
        return self.gravatar(size=size)
