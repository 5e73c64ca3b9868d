import uuid

from django.db import models


class User(models.Model):
    """Store customer. Not tied to django.contrib.auth; the API has no login."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=30)
    last_name = models.CharField(max_length=30)
    address = models.TextField(blank=True, default='')
    saved_products = models.ManyToManyField('sales.Product', related_name='saved_by', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users_user'
        indexes = [
            models.Index(fields=['created_at'], name='users_user_created_at_idx'),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name} <{self.email}>"


class UserPreference(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='preference')
    receive_email = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users_preference'

    def __str__(self):
        return f"Preferences of {self.user_id}"
