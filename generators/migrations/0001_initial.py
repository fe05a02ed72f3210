from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Generator",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "name",
                    models.CharField(help_text="Generator display name", max_length=255),
                ),
                (
                    "charset",
                    models.CharField(help_text="Characters keys are drawn from", max_length=255),
                ),
                ("chunks", models.PositiveIntegerField(help_text="Number of segments per key")),
                ("chunk_length", models.PositiveIntegerField(help_text="Characters per segment")),
                (
                    "times_activated_max",
                    models.PositiveIntegerField(
                        blank=True, help_text="Maximum activations per issued key", null=True
                    ),
                ),
                ("separator", models.CharField(blank=True, max_length=255, null=True)),
                ("prefix", models.CharField(blank=True, max_length=255, null=True)),
                ("suffix", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "expires_in",
                    models.PositiveIntegerField(
                        blank=True, help_text="Days until an issued key expires", null=True
                    ),
                ),
                ("created_at", models.DateTimeField()),
                ("created_by", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.PositiveIntegerField(blank=True, null=True)),
            ],
            options={
                "db_table": "generators",
                "ordering": ["id"],
            },
        ),
    ]
