from django.db import models


# Street or house values imported from the old database as a stand-in for "unknown"
ADDRESS_PLACEHOLDER = 'Empty'
ADDRESS_NOT_SPECIFIED = 'Адрес не указан'


class Locality(models.Model):
    """City or town where stores are located."""

    town_ru = models.CharField(max_length=100)
    town_en = models.CharField(max_length=100, blank=True)
    code = models.CharField(max_length=20)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'localities'
        ordering = ['town_ru']
        verbose_name = 'city'
        verbose_name_plural = 'cities'

    def __str__(self):
        return self.town_ru


class Store(models.Model):
    """A shop where purchases are made."""

    shop = models.CharField(max_length=200)
    street = models.CharField(max_length=200)
    house = models.CharField(max_length=20)
    phone = models.CharField(max_length=30, blank=True)
    locality = models.ForeignKey(
        Locality,
        on_delete=models.PROTECT,
        related_name='stores'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stores'
        ordering = ['shop']
        indexes = [
            models.Index(fields=['locality'], name='stores_locality_idx'),
        ]

    def __str__(self):
        return f"{self.shop} ({self.address})"

    @property
    def address(self):
        """Short address: street and house number."""
        return f"{self.street}, {self.house}"

    @property
    def full_address(self):
        """
        Human-readable address with city.

        Blank parts and the legacy 'Empty' placeholder are skipped.
        """
        return format_address(
            city=self.locality.town_ru if self.locality_id else '',
            street=self.street,
            house=self.house,
        )


def _is_filled(value):
    value = (value or '').strip()
    return value not in ('', ADDRESS_PLACEHOLDER)


def format_address(*, city='', street='', house=''):
    """Join city, street and house into 'city, ул. street, д. house'."""
    parts = []
    if _is_filled(city):
        parts.append(city.strip())
    if _is_filled(street):
        parts.append(f"ул. {street.strip()}")
    if _is_filled(house):
        parts.append(f"д. {house.strip()}")
    return ', '.join(parts) if parts else ADDRESS_NOT_SPECIFIED
