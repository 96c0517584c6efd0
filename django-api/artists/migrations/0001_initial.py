import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MusicStyle",
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
                ("style_name", models.CharField(max_length=100, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "music_styles",
                "ordering": ["style_name"],
            },
        ),
        migrations.CreateModel(
            name="Artist",
            fields=[
                (
                    "id",
                    models.UUIDField(editable=False, primary_key=True, serialize=False),
                ),
                ("artist_name", models.CharField(max_length=255)),
                ("biography", models.TextField()),
                ("instagram_url", models.URLField(blank=True, max_length=500, null=True)),
                ("facebook_url", models.URLField(blank=True, max_length=500, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "artists",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ArtistMusicStyle",
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
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "artist",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="style_links",
                        to="artists.artist",
                    ),
                ),
                (
                    "music_style",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="artist_links",
                        to="artists.musicstyle",
                    ),
                ),
            ],
            options={
                "db_table": "artist_music_styles",
            },
        ),
        migrations.AddField(
            model_name="artist",
            name="music_styles",
            field=models.ManyToManyField(
                related_name="artists",
                through="artists.ArtistMusicStyle",
                to="artists.musicstyle",
            ),
        ),
        migrations.AddConstraint(
            model_name="artist",
            constraint=models.UniqueConstraint(
                fields=("artist_name",), name="uq_artists_artist_name"
            ),
        ),
        migrations.AddIndex(
            model_name="artist",
            index=models.Index(fields=["-created_at"], name="idx_artists_created_at"),
        ),
        migrations.AddConstraint(
            model_name="artistmusicstyle",
            constraint=models.UniqueConstraint(
                fields=("artist", "music_style"), name="uq_artist_music_style"
            ),
        ),
        migrations.AddIndex(
            model_name="artistmusicstyle",
            index=models.Index(fields=["music_style"], name="idx_artist_styles_style"),
        ),
    ]
