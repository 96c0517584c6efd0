import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ErrorLog",
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
                ("error_message", models.TextField()),
                ("error_type", models.CharField(max_length=50)),
                ("request_url", models.CharField(blank=True, max_length=2048, null=True)),
                ("request_method", models.CharField(blank=True, max_length=10, null=True)),
                ("user_agent", models.CharField(blank=True, max_length=512, null=True)),
                ("user_id", models.UUIDField(blank=True, null=True)),
                ("request_body", models.TextField(blank=True, null=True)),
                ("stack_trace", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "error_logs",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddIndex(
            model_name="errorlog",
            index=models.Index(fields=["error_type", "created_at"], name="idx_error_logs_type"),
        ),
        migrations.AddIndex(
            model_name="errorlog",
            index=models.Index(fields=["user_id"], name="idx_error_logs_user"),
        ),
    ]
