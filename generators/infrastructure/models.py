"""
Generator model.
"""
from django.db import models


class Generator(models.Model):
    """
    A license key generator.

    Stores how keys are formatted (charset, chunks, decorations) and the
    limits applied to keys issued from it. Audit columns are set by the
    domain layer, not by Django.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, help_text="Generator display name")
    charset = models.CharField(max_length=255, help_text="Characters keys are drawn from")
    chunks = models.PositiveIntegerField(help_text="Number of segments per key")
    chunk_length = models.PositiveIntegerField(help_text="Characters per segment")
    times_activated_max = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Maximum activations per issued key",
    )
    separator = models.CharField(max_length=255, null=True, blank=True)
    prefix = models.CharField(max_length=255, null=True, blank=True)
    suffix = models.CharField(max_length=255, null=True, blank=True)
    expires_in = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Days until an issued key expires",
    )
    created_at = models.DateTimeField()
    created_by = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(null=True, blank=True)
    updated_by = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = "generators"
        ordering = ["id"]

    def __str__(self):
        return self.name
