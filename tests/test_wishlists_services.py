# tests/test_wishlists_services.py
from datetime import timedelta

import pytest

from django.db import IntegrityError, transaction
from django.utils import timezone

import domains.wishlists.services as svc
from domains.customers.models import CustomerProfile
from domains.wishlists.models import WishlistItem, WishlistSyncState

SHOP = "a.myshopify.com"
OTHER_SHOP = "b.myshopify.com"


@pytest.mark.django_db
class TestStore:
    def test_add_is_idempotent(self):
        assert svc.add("1", "2", SHOP) is True
        assert svc.add("1", "2", SHOP) is False
        assert WishlistItem.objects.count() == 1

    def test_numeric_and_gid_are_same_item(self):
        svc.add("gid://shopify/Customer/1", "gid://shopify/Product/2", SHOP)
        assert svc.add("1", "2", SHOP) is False
        assert svc.exists("1", "gid://shopify/Product/2", SHOP)

        item = WishlistItem.objects.get()
        assert (item.customer_id, item.product_id) == ("1", "2")

    def test_unique_constraint_blocks_duplicates(self, wishlist_item_factory):
        wishlist_item_factory("1", "2")
        with pytest.raises(IntegrityError), transaction.atomic():
            WishlistItem.objects.create(customer_id="1", product_id="2", shop=SHOP)

    def test_same_pair_in_other_shop_is_separate(self):
        svc.add("1", "2", SHOP)
        svc.add("1", "2", OTHER_SHOP)
        assert WishlistItem.objects.count() == 2
        assert svc.projection_for("1", OTHER_SHOP) == ["gid://shopify/Product/2"]

    def test_remove_missing_is_not_an_error(self):
        assert svc.remove("1", "999", SHOP) == 0

    def test_remove_is_scoped_to_shop(self):
        svc.add("1", "2", SHOP)
        svc.add("1", "2", OTHER_SHOP)
        assert svc.remove("1", "2", SHOP) == 1
        assert not svc.exists("1", "2", SHOP)
        assert svc.exists("1", "2", OTHER_SHOP)

    def test_projection_is_newest_first(self):
        for pid in ("2", "3", "4"):
            svc.add("1", pid, SHOP)
        assert svc.projection_for("1", SHOP) == [
            "gid://shopify/Product/4",
            "gid://shopify/Product/3",
            "gid://shopify/Product/2",
        ]

    def test_projection_empty(self):
        assert svc.projection_for("1", SHOP) == []


@pytest.mark.django_db
class TestApplyMutation:
    def test_add_returns_projection(self):
        wishlist = svc.apply_wishlist_mutation(svc.ADD, customer_id="1", product_id="2", shop=SHOP)
        assert wishlist == ["gid://shopify/Product/2"]

    def test_no_session_means_nothing_enqueued(self, enqueued):
        svc.apply_wishlist_mutation(svc.ADD, customer_id="1", product_id="2", shop=SHOP)
        svc.apply_wishlist_mutation(svc.REMOVE, customer_id="1", product_id="2", shop=SHOP)
        assert enqueued == []

    def test_session_enqueues_push_and_profile_refresh(self, shop_session, enqueued):
        svc.apply_wishlist_mutation(svc.ADD, customer_id="gid://shopify/Customer/1", product_id="2", shop=SHOP)

        names = [name for name, _ in enqueued]
        assert "domains.customers.tasks.refresh_customer_profile" in names
        assert ("domains.wishlists.tasks.push_wishlist_metafield", ("1", SHOP)) in enqueued

    def test_remove_with_session_pushes_only(self, shop_session, enqueued):
        svc.add("1", "2", SHOP)
        wishlist = svc.apply_wishlist_mutation(svc.REMOVE, customer_id="1", product_id="2", shop=SHOP)

        assert wishlist == []
        assert enqueued == [("domains.wishlists.tasks.push_wishlist_metafield", ("1", SHOP))]

    def test_customer_info_upserts_profile_without_remote_fetch(self, shop_session, enqueued):
        info = {"firstName": "Jane", "lastName": "Doe", "email": "jane@example.com", "ordersCount": 2,
                "totalSpent": "10.5"}
        svc.apply_wishlist_mutation(svc.ADD, customer_id="1", product_id="2", shop=SHOP, customer_info=info)

        profile = CustomerProfile.objects.get(customer_id="1", shop=SHOP)
        assert profile.first_name == "Jane"
        assert profile.orders_count == 2
        assert str(profile.total_spent) == "10.50"
        assert all(name != "domains.customers.tasks.refresh_customer_profile" for name, _ in enqueued)

    def test_invalid_customer_info_is_ignored(self):
        wishlist = svc.apply_wishlist_mutation(
            svc.ADD, customer_id="1", product_id="2", shop=SHOP, customer_info={"ordersCount": "many"}
        )
        assert wishlist == ["gid://shopify/Product/2"]
        assert not CustomerProfile.objects.exists()

    @pytest.mark.parametrize(
        "info",
        [{"ordersCount": 2 ** 70}, {"totalSpent": "1000000000000000"}, {"phone": "0" * 65}],
    )
    def test_out_of_range_customer_info_does_not_abort_mutation(self, info):
        wishlist = svc.apply_wishlist_mutation(
            svc.ADD, customer_id="1", product_id="2", shop=SHOP, customer_info=info
        )
        assert wishlist == ["gid://shopify/Product/2"]
        assert not CustomerProfile.objects.exists()

    def test_profile_write_failure_does_not_abort_mutation(self, monkeypatch):
        import domains.customers.services as customer_svc

        def _overflow(*a, **kw):
            raise OverflowError("Python int too large to convert to SQLite INTEGER")

        monkeypatch.setattr(customer_svc, "upsert_profile", _overflow)
        wishlist = svc.apply_wishlist_mutation(
            svc.ADD, customer_id="1", product_id="2", shop=SHOP, customer_info={"firstName": "Jane"}
        )
        assert wishlist == ["gid://shopify/Product/2"]
        assert WishlistItem.objects.count() == 1

    def test_enqueue_failure_does_not_break_mutation(self, shop_session, monkeypatch):
        from domains.wishlists.tasks import push_wishlist_metafield

        def _boom(*a, **kw):
            raise ConnectionError("broker down")

        monkeypatch.setattr(push_wishlist_metafield, "delay", _boom)
        wishlist = svc.apply_wishlist_mutation(svc.REMOVE, customer_id="1", product_id="2", shop=SHOP)
        assert wishlist == []

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            svc.apply_wishlist_mutation("toggle", customer_id="1", product_id="2", shop=SHOP)


@pytest.mark.django_db
def test_customer_summaries_with_profile_and_placeholder(wishlist_item_factory):
    """프로필이 있으면 캐시 값, 없으면 placeholder"""
    wishlist_item_factory("1", "2")
    wishlist_item_factory("1", "3")
    wishlist_item_factory("7", "2")
    wishlist_item_factory("1", "2", shop=OTHER_SHOP)
    CustomerProfile.objects.create(customer_id="1", shop=SHOP, first_name="Jane", email="jane@example.com")

    data = svc.customer_summaries(shop=SHOP)
    assert data["totalCustomers"] == 2
    assert data["totalProducts"] == 3

    by_id = {c["customerId"]: c for c in data["customers"]}
    assert by_id["1"]["productCount"] == 2
    assert by_id["1"]["customerInfo"]["firstName"] == "Jane"
    assert by_id["7"]["customerInfo"]["firstName"] == "Unknown"
    assert by_id["7"]["customerInfo"]["email"] == "N/A"

    # 다른 shop 프로필은 섞이지 않는다
    all_shops = svc.customer_summaries()
    other = [c for c in all_shops["customers"] if c["shop"] == OTHER_SHOP][0]
    assert other["customerInfo"]["firstName"] == "Unknown"
    assert all_shops["totalProducts"] == 4


@pytest.mark.django_db
class TestSyncState:
    def test_mutation_marks_pair_dirty(self):
        svc.apply_wishlist_mutation(svc.ADD, customer_id="gid://shopify/Customer/1", product_id="2", shop=SHOP)
        state = WishlistSyncState.objects.get()
        assert (state.customer_id, state.shop, state.dirty) == ("1", SHOP, True)

    def test_remove_keeps_state_row_for_empty_wishlist(self):
        svc.apply_wishlist_mutation(svc.ADD, customer_id="1", product_id="2", shop=SHOP)
        svc.mark_synced("1", SHOP, since=timezone.now())
        svc.apply_wishlist_mutation(svc.REMOVE, customer_id="1", product_id="2", shop=SHOP)

        assert not WishlistItem.objects.exists()
        assert WishlistSyncState.objects.get(customer_id="1", shop=SHOP).dirty is True

    def test_mark_synced_ignores_changes_after_projection(self):
        before = timezone.now() - timedelta(seconds=5)
        svc.mark_dirty("1", SHOP)
        assert svc.mark_synced("1", SHOP, since=before) == 0
        assert WishlistSyncState.objects.get().dirty is True

        assert svc.mark_synced("1", SHOP, since=timezone.now()) == 1
        state = WishlistSyncState.objects.get()
        assert state.dirty is False
        assert state.last_pushed_at is not None
