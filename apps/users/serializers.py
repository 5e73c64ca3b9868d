from django.db import transaction
from rest_framework import serializers

from .models import User, UserPreference


class UserPreferenceSerializer(serializers.ModelSerializer):
    receiveEmail = serializers.BooleanField(source='receive_email')
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = UserPreference
        fields = ('id', 'receiveEmail', 'createdAt', 'updatedAt')


class UserSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', min_length=1, max_length=30)
    lastName = serializers.CharField(source='last_name', min_length=1, max_length=30)
    userPreference = UserPreferenceSerializer(source='preference')
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = User
        fields = ('id', 'email', 'firstName', 'lastName', 'address', 'userPreference', 'createdAt', 'updatedAt')

    def create(self, validated_data):
        preference = validated_data.pop('preference')
        with transaction.atomic():
            user = User.objects.create(**validated_data)
            UserPreference.objects.create(user=user, **preference)
        return user

    def update(self, instance, validated_data):
        preference = validated_data.pop('preference', None)
        with transaction.atomic():
            for attr, value in validated_data.items():
                setattr(instance, attr, value)
            instance.save()
            if preference:
                UserPreference.objects.update_or_create(user=instance, defaults=preference)
        # drop the cached reverse one-to-one so the response shows the new values
        instance.refresh_from_db()
        return instance


class SaveProductSerializer(serializers.Serializer):
    productId = serializers.UUIDField(source='product_id')
