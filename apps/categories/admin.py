# ==========================================
# apps/categories/admin.py
# ==========================================

from django.contrib import admin
from django.db.models import Count
from django.utils.html import format_html
from .models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for purchase categories."""

    list_display = [
        'name',
        'icon',
        'color_swatch',
        'sort_order',
        'is_active_badge',
        'purchases_count',
    ]
    list_editable = ['sort_order']
    list_filter = ['is_active']
    search_fields = ['name', 'description']
    ordering = ['sort_order', 'name']
    readonly_fields = ['created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_purchases_count=Count('purchases'))

    @admin.display(description='Color')
    def color_swatch(self, obj):
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            obj.color,
            obj.color,
        )

    @admin.display(description='Status', ordering='is_active')
    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #28a745; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                'Active',
            )
        return format_html(
            '<span style="background: #6c757d; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            'Inactive',
        )

    @admin.display(description='Purchases', ordering='_purchases_count')
    def purchases_count(self, obj):
        return obj._purchases_count

    actions = ['activate_categories', 'deactivate_categories']

    @admin.action(description='Activate selected categories')
    def activate_categories(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} category(ies).')

    @admin.action(description='Deactivate selected categories')
    def deactivate_categories(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'Deactivated {count} category(ies).')
