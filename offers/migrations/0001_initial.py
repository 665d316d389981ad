from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Offer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "city",
                    models.CharField(
                        choices=[
                            ("Paris", "Paris"),
                            ("Cologne", "Cologne"),
                            ("Brussels", "Brussels"),
                            ("Amsterdam", "Amsterdam"),
                            ("Hamburg", "Hamburg"),
                            ("Dusseldorf", "Dusseldorf"),
                        ],
                        max_length=20,
                    ),
                ),
                ("is_premium", models.BooleanField(default=False)),
                ("price", models.PositiveIntegerField(default=0)),
                ("comments_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="offers",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "offers",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
