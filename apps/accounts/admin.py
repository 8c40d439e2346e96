from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count, Sum
from django.utils.html import format_html
from apps.purchases.models import Purchase
from .models import User


class PurchaseInline(admin.TabularInline):
    """Latest purchases of a member, read-only."""

    model = Purchase
    fields = ['date', 'name', 'store', 'category', 'quantity', 'unit', 'amount']
    readonly_fields = fields
    ordering = ['-date']
    extra = 0
    max_num = 0
    can_delete = False
    show_change_link = True


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Household members with their purchase totals."""

    list_display = [
        'email',
        'display_name',
        'status_badge',
        'purchases_count',
        'total_spent',
        'last_login',
    ]
    list_filter = ['is_active', 'is_staff']
    search_fields = ['email', 'display_name']
    ordering = ['email']

    fieldsets = (
        (None, {'fields': ('email', 'password', 'display_name')}),
        ('Access', {'fields': ('is_active', 'is_staff', 'is_superuser', 'user_permissions')}),
        ('Dates', {'fields': ('created_at', 'last_login')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )
    readonly_fields = ['created_at', 'last_login']
    filter_horizontal = ['user_permissions']
    inlines = [PurchaseInline]
    actions = ['deactivate_members']

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _purchases_count=Count('purchases'),
            _total_spent=Sum('purchases__amount'),
        )

    @admin.display(description='Active', ordering='is_active')
    def status_badge(self, obj):
        color = '#28a745' if obj.is_active else '#dc3545'
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            'yes' if obj.is_active else 'no',
        )

    @admin.display(description='Purchases', ordering='_purchases_count')
    def purchases_count(self, obj):
        return obj._purchases_count

    @admin.display(description='Spent', ordering='_total_spent')
    def total_spent(self, obj):
        return obj._total_spent or 0

    @admin.action(description='Deactivate selected members (superusers are kept)')
    def deactivate_members(self, request, queryset):
        count = queryset.filter(is_superuser=False).update(is_active=False)
        self.message_user(request, f'Deactivated {count} member(s).')
