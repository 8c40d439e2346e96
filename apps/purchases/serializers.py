from rest_framework import serializers
from apps.categories.models import Category
from apps.stores.models import Store
from apps.stores.serializers import StoreMinimalSerializer
from .models import Purchase


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for purchase filtering.

    Query Parameters:
        category (int): Filter by category ID
        store (int): Filter by store ID
        date_from (date): Filter purchases from this date
        date_to (date): Filter purchases to this date
        search (str): Substring of product name or characteristic
    """

    category = serializers.IntegerField(required=False, min_value=1)
    store = serializers.IntegerField(required=False, min_value=1)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)
    search = serializers.CharField(required=False, allow_blank=True, max_length=100)

    def validate(self, attrs):
        """Validate date range."""
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to:
            if date_from > date_to:
                raise serializers.ValidationError({
                    'date_to': 'End date must be after start date'
                })

        return attrs


class PurchaseWriteSerializer(serializers.ModelSerializer):
    """
    Validate purchase input for create and update.

    `amount` is optional: when omitted it is derived from price and quantity.
    """

    store = serializers.PrimaryKeyRelatedField(queryset=Store.objects.all())
    category = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all())
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=0,
        required=False
    )

    class Meta:
        model = Purchase
        fields = [
            'date',
            'store',
            'category',
            'name',
            'characteristic',
            'quantity',
            'unit',
            'price',
            'amount',
        ]
        extra_kwargs = {
            'quantity': {'required': True},
        }

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Product name is required')
        return value


# =============================================================================
# Output Serializers
# =============================================================================

class PurchaseSerializer(serializers.ModelSerializer):
    """Full purchase representation with store and category details."""

    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)
    category_icon = serializers.CharField(source='category.icon', read_only=True, allow_null=True)
    category_color = serializers.CharField(source='category.color', read_only=True, allow_null=True)
    store_detail = StoreMinimalSerializer(source='store', read_only=True)
    full_address = serializers.CharField(source='store.full_address', read_only=True)

    class Meta:
        model = Purchase
        fields = [
            'id',
            'date',
            'name',
            'characteristic',
            'quantity',
            'unit',
            'price',
            'amount',
            'category',
            'category_name',
            'category_icon',
            'category_color',
            'store',
            'store_detail',
            'full_address',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PurchaseExportSerializer(serializers.ModelSerializer):
    """Flat purchase row for JSON export."""

    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)
    store_name = serializers.CharField(source='store.shop', read_only=True)

    class Meta:
        model = Purchase
        fields = [
            'id',
            'date',
            'name',
            'characteristic',
            'quantity',
            'unit',
            'price',
            'amount',
            'category_name',
            'store_name',
        ]
        read_only_fields = fields


class PurchaseExportResponseSerializer(serializers.Serializer):
    exported_at = serializers.DateTimeField()
    count = serializers.IntegerField()
    data = PurchaseExportSerializer(many=True)
