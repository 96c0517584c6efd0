import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("artists", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("event_name", models.TextField()),
                ("country", models.CharField(max_length=100)),
                ("city", models.CharField(max_length=100)),
                ("venue_name", models.CharField(max_length=200)),
                ("event_date", models.DateField()),
                ("event_time", models.TimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "artist",
                    models.ForeignKey(
                        db_column="user_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="artists.artist",
                    ),
                ),
            ],
            options={
                "db_table": "events",
                "ordering": ["-event_date", "-created_at"],
            },
        ),
        migrations.AddIndex(
            model_name="event",
            index=models.Index(fields=["-event_date", "-created_at"], name="idx_events_date"),
        ),
        migrations.AddIndex(
            model_name="event",
            index=models.Index(fields=["artist", "event_date"], name="idx_events_artist_date"),
        ),
    ]
