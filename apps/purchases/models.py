from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal, ROUND_HALF_UP


class Unit(models.TextChoices):
    PIECE = 'pcs', 'Pieces'
    KILOGRAM = 'kg', 'Kilograms'
    LITRE = 'l', 'Litres'
    MILLILITRE = 'ml', 'Millilitres'
    METRE = 'm', 'Metres'
    SQUARE_METRE = 'm2', 'Square metres'
    CUBIC_METRE = 'm3', 'Cubic metres'
    KILOWATT_HOUR = 'kwh', 'Kilowatt-hours'
    PACK = 'pack', 'Packs'


def calculate_amount(price, quantity):
    """Line total: price times quantity, rounded half-up to kopecks."""
    return (Decimal(price) * Decimal(quantity)).quantize(
        Decimal('0.01'),
        rounding=ROUND_HALF_UP
    )


class Purchase(models.Model):
    """A single purchased item line: what, where, when and for how much."""

    owner = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='purchases'
    )

    date = models.DateField()
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.PROTECT,
        related_name='purchases'
    )
    # Nullable only for imported rows that have not been linked yet
    category = models.ForeignKey(
        'categories.Category',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='purchases'
    )

    # Item
    name = models.CharField(max_length=200)
    characteristic = models.CharField(max_length=255, blank=True, default='')
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        default=Decimal('1'),
        validators=[MinValueValidator(Decimal('0.001'))]
    )
    unit = models.CharField(
        max_length=10,
        choices=Unit.choices,
        default=Unit.PIECE
    )

    # Money
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Free-text category name carried over from the old database
    legacy_group = models.CharField(max_length=100, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'purchases'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['owner', 'date'], name='purchases_owner_date_idx'),
            models.Index(fields=['category', 'date'], name='purchases_category_date_idx'),
            models.Index(fields=['store', 'date'], name='purchases_store_date_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.amount} ({self.date})"

    def save(self, *args, **kwargs):
        if self.amount is None and self.price is not None and self.quantity is not None:
            self.amount = calculate_amount(self.price, self.quantity)
        super().save(*args, **kwargs)
