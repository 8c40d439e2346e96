from django.core.validators import RegexValidator
from django.db import models


DEFAULT_ICON = '📦'
DEFAULT_COLOR = '#007bff'
DEFAULT_SORT_ORDER = 100

hex_color_validator = RegexValidator(
    regex=r'^#[0-9A-Fa-f]{6}$',
    message='Color must be a hex value like #007bff',
)


class Category(models.Model):
    """
    Purchase category (groceries, household chemicals, tools...).

    Categories referenced by purchases are never deleted, only deactivated,
    so historical statistics keep their names and colors.
    """

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=16, default=DEFAULT_ICON)
    color = models.CharField(
        max_length=7,
        default=DEFAULT_COLOR,
        validators=[hex_color_validator]
    )
    sort_order = models.IntegerField(default=DEFAULT_SORT_ORDER)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'categories'
        ordering = ['sort_order', 'name']
        verbose_name_plural = 'categories'
        indexes = [
            models.Index(fields=['is_active', 'sort_order'], name='categories_active_sort_idx'),
        ]

    def __str__(self):
        return f"{self.icon} {self.name}"
