# ==========================================
# apps/stores/admin.py
# ==========================================

from django.contrib import admin
from django.db.models import Count
from .models import Locality, Store


class StoreInline(admin.TabularInline):
    """Inline admin for stores in a city."""
    model = Store
    extra = 0
    fields = ['shop', 'street', 'house', 'phone']


@admin.register(Locality)
class LocalityAdmin(admin.ModelAdmin):
    """Admin interface for cities."""

    list_display = ['town_ru', 'town_en', 'code', 'stores_count']
    search_fields = ['town_ru', 'town_en', 'code']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [StoreInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_stores_count=Count('stores'))

    @admin.display(description='Stores', ordering='_stores_count')
    def stores_count(self, obj):
        return obj._stores_count


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """Admin interface for stores."""

    list_display = ['shop', 'full_address', 'phone', 'locality', 'purchases_count']
    list_filter = ['locality']
    search_fields = ['shop', 'street', 'house', 'phone']
    list_select_related = ['locality']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Store', {
            'fields': ('shop', 'phone')
        }),
        ('Address', {
            'fields': ('locality', 'street', 'house')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_purchases_count=Count('purchases'))

    @admin.display(description='Purchases', ordering='_purchases_count')
    def purchases_count(self, obj):
        return obj._purchases_count
