from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ProductRow",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                ("name", models.CharField(max_length=255)),
                ("code", models.CharField(max_length=64, unique=True)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=2048),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
            },
        ),
    ]
