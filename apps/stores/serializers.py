from rest_framework import serializers
from .models import Locality, Store


# =============================================================================
# Input Serializers
# =============================================================================

class StoreFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for store listing.

    Query Parameters:
        locality (int): Only stores in this city
    """

    locality = serializers.IntegerField(required=False, min_value=1)


# =============================================================================
# Model Serializers
# =============================================================================

class LocalitySerializer(serializers.ModelSerializer):
    """City with the number of stores located in it."""

    stores_count = serializers.SerializerMethodField()

    class Meta:
        model = Locality
        fields = [
            'id',
            'town_ru',
            'town_en',
            'code',
            'stores_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_stores_count(self, obj) -> int:
        # Annotated by the list queryset, counted on demand otherwise
        count = getattr(obj, 'stores_count', None)
        if count is None:
            count = obj.stores.count()
        return count


class StoreSerializer(serializers.ModelSerializer):
    """Store with its city name and formatted addresses."""

    locality = serializers.PrimaryKeyRelatedField(queryset=Locality.objects.all())
    city_name = serializers.CharField(source='locality.town_ru', read_only=True)
    address = serializers.CharField(read_only=True)
    full_address = serializers.CharField(read_only=True)

    class Meta:
        model = Store
        fields = [
            'id',
            'shop',
            'street',
            'house',
            'phone',
            'locality',
            'city_name',
            'address',
            'full_address',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class StoreMinimalSerializer(serializers.ModelSerializer):
    """Compact store info for nesting in purchases."""

    city_name = serializers.CharField(source='locality.town_ru', read_only=True)

    class Meta:
        model = Store
        fields = ['id', 'shop', 'street', 'house', 'city_name']
        read_only_fields = fields
