from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserRow",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                ("name", models.CharField(max_length=255)),
                ("email", models.CharField(max_length=254, unique=True)),
                ("role", models.CharField(blank=True, default="", max_length=64)),
                (
                    "password",
                    models.CharField(blank=True, default="", max_length=255),
                ),
            ],
            options={
                "db_table": "users",
                "ordering": ["id"],
            },
        ),
    ]
