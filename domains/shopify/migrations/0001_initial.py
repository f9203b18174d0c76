from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ShopSession",
            fields=[
                ("id", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("shop", models.CharField(db_index=True, max_length=255)),
                ("state", models.CharField(blank=True, default="", max_length=255)),
                ("is_online", models.BooleanField(default=False)),
                ("scope", models.TextField(blank=True, default="")),
                ("expires", models.DateTimeField(blank=True, null=True)),
                ("access_token", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "shopify_sessions",
                "indexes": [models.Index(fields=["shop", "is_online"], name="shopify_ses_shop_online_idx")],
            },
        ),
    ]
