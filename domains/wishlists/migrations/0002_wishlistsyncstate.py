from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("wishlists", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="WishlistSyncState",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_id", models.CharField(max_length=64)),
                ("shop", models.CharField(max_length=255)),
                ("dirty", models.BooleanField(default=True)),
                ("last_pushed_at", models.DateTimeField(blank=True, null=True)),
                ("last_error", models.TextField(blank=True, default="")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "wishlist_sync_states",
                "indexes": [models.Index(fields=["dirty", "shop"], name="wishlist_sync_dirty_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("customer_id", "shop"), name="uq_wishlist_sync_customer_shop"),
                ],
            },
        ),
    ]
