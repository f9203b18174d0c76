from django.core.management.base import BaseCommand, CommandError

from domains.customers.serializers import CustomerProfileSerializer
from domains.customers.services import fetch_and_cache_profile
from domains.shopify.client import ShopifyAdminClient
from domains.shopify.exceptions import ShopifyAPIError, ShopSessionMissing


class Command(BaseCommand):
    help = "Shopify 에서 고객 정보를 조회해 프로필 캐시에 저장합니다."

    def add_arguments(self, parser):
        parser.add_argument("shop", help="예: my-store.myshopify.com")
        parser.add_argument("customer_id", help="숫자 ID 또는 gid://shopify/Customer/...")

    def handle(self, *args, **opts):
        shop = opts["shop"]
        customer_id = opts["customer_id"]
        try:
            client = ShopifyAdminClient.for_shop(shop)
            node, profile = fetch_and_cache_profile(customer_id, shop, client)
        except ShopSessionMissing:
            raise CommandError(f"No session found for {shop}")
        except ShopifyAPIError as e:
            raise CommandError(f"Shopify error: {e}")

        if profile is None:
            raise CommandError(f"Customer {customer_id} not found in Shopify")

        self.stdout.write(self.style.SUCCESS(f"Customer {profile.customer_id} info saved to database"))
        self.stdout.write(str(CustomerProfileSerializer(profile).data))
