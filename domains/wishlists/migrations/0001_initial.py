from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WishlistItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_id", models.CharField(max_length=64)),
                ("product_id", models.CharField(max_length=64)),
                ("shop", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "wishlist_items",
                "indexes": [
                    models.Index(fields=["customer_id", "shop", "-created_at"], name="wishlist_cust_shop_recent_idx"),
                    models.Index(fields=["shop"], name="wishlist_shop_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("customer_id", "product_id", "shop"),
                        name="uq_wishlist_customer_product_shop",
                    ),
                ],
            },
        ),
    ]
