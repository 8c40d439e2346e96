from rest_framework import serializers
from .models import Category


class CategoryFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for category listing.

    Query Parameters:
        include_inactive (bool): Also list deactivated categories
    """

    include_inactive = serializers.BooleanField(required=False, default=False)


class CategorySerializer(serializers.ModelSerializer):
    """Full category representation."""

    class Meta:
        model = Category
        fields = [
            'id',
            'name',
            'description',
            'icon',
            'color',
            'sort_order',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            # Form input reads a missing checkbox as False
            'is_active': {'default': True},
        }

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category name is required')
        return value


class CategoryRemovalResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    deactivated = serializers.BooleanField()
