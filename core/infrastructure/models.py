"""
Option model.
"""
from django.db import models


class Option(models.Model):
    """
    A named configuration value (e.g. the general API settings).

    Values are JSON documents; the general settings option holds the
    enabled/disabled flags of each API route.
    """

    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "options"
        ordering = ["name"]

    def __str__(self):
        return self.name
