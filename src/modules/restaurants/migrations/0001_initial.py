from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Restaurant",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("category", models.CharField(max_length=50)),
                ("rating", models.DecimalField(decimal_places=2, max_digits=3)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "restaurants",
                "ordering": ["name"],
                "indexes": [
                    models.Index(
                        fields=["category", "is_active"],
                        name="restaurants_category_idx",
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("rating__gte", Decimal("0.00")),
                            ("rating__lte", Decimal("5.00")),
                        ),
                        name="restaurants_rating_range",
                    )
                ],
            },
        ),
    ]
