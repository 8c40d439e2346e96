# ==========================================
# apps/purchases/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Purchase


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    """Admin interface for purchases."""

    list_display = [
        'date',
        'name',
        'category_badge',
        'store',
        'quantity',
        'unit',
        'price',
        'amount',
        'owner',
    ]
    list_filter = [
        'category',
        'store__locality',
        'store',
        'unit',
        'date',
    ]
    search_fields = [
        'name',
        'characteristic',
        'legacy_group',
        'store__shop',
        'owner__email',
    ]
    list_select_related = ['category', 'store', 'owner']
    date_hierarchy = 'date'
    ordering = ['-date', '-created_at']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Purchase', {
            'fields': ('owner', 'date', 'store', 'category')
        }),
        ('Item', {
            'fields': ('name', 'characteristic', 'quantity', 'unit', 'price', 'amount')
        }),
        ('Legacy data', {
            'fields': ('legacy_group',),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    @admin.display(description='Category', ordering='category__name')
    def category_badge(self, obj):
        """Display category with its color."""
        if obj.category is None:
            return format_html(
                '<span style="background: {}; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                '#6c757d', 'Uncategorized'
            )
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{} {}</span>',
            obj.category.color, obj.category.icon, obj.category.name
        )
