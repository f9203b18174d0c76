# domains/shopify/client.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from django.conf import settings

import requests

from . import gid
from .exceptions import ShopifyAPIError, ShopSessionMissing
from .sessions import get_offline_session

logger = logging.getLogger(__name__)


CUSTOMER_QUERY = """
query getCustomer($id: ID!) {
  customer(id: $id) {
    id
    firstName
    lastName
    email
    phone
    numberOfOrders
    amountSpent {
      amount
    }
  }
}
"""

CUSTOMER_METAFIELD_QUERY = """
query getCustomerMetafield($id: ID!, $namespace: String!, $key: String!) {
  customer(id: $id) {
    id
    metafield(namespace: $namespace, key: $key) {
      id
      value
    }
  }
}
"""

METAFIELDS_SET_MUTATION = """
mutation metafieldsSet($metafields: [MetafieldsSetInput!]!) {
  metafieldsSet(metafields: $metafields) {
    metafields {
      id
      namespace
      key
    }
    userErrors {
      field
      message
    }
  }
}
"""

PRODUCTS_QUERY = """
query getProducts($ids: [ID!]!) {
  nodes(ids: $ids) {
    ... on Product {
      id
      title
      handle
      vendor
      totalInventory
      featuredImage {
        url
        altText
      }
      variants(first: 1) {
        edges {
          node {
            id
            price
            compareAtPrice
            inventoryQuantity
          }
        }
      }
    }
  }
}
"""

PRODUCT_QUERY = """
query getProduct($id: ID!) {
  product(id: $id) {
    id
    title
    handle
    description
    featuredImage {
      url
    }
    priceRangeV2 {
      minVariantPrice {
        amount
        currencyCode
      }
    }
  }
}
"""


class ShopifyAdminClient:
    """
    Shopify Admin GraphQL API 클라이언트 (shop 단위, bearer access token 인증)
    """

    def __init__(self, shop: str, access_token: str, api_version: Optional[str] = None, timeout=None):
        self.shop = (shop or "").strip()
        self.access_token = access_token
        self.api_version = api_version or settings.SHOPIFY_API_VERSION
        self.timeout = timeout or settings.SHOPIFY_REQUEST_TIMEOUT

    @classmethod
    def for_shop(cls, shop: str) -> "ShopifyAdminClient":
        """offline 세션으로 클라이언트 생성. 세션이 없으면 ShopSessionMissing."""
        session = get_offline_session(shop)
        if session is None:
            raise ShopSessionMissing(f"No active session found for shop: {shop}")
        return cls(shop, session.access_token)

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}/graphql.json"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.access_token,
        }

    # ------------------------------------------------------------------
    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        POST {query, variables} → data 딕셔너리.
        네트워크 오류, non-2xx, JSON 아님, 최상위 errors 는 모두 ShopifyAPIError.
        """
        payload = {"query": query, "variables": variables or {}}
        try:
            res = requests.post(self.endpoint, headers=self._headers(), json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ShopifyAPIError(f"Shopify request failed: {e}") from e

        if not res.ok:
            logger.warning("Shopify non-2xx: %s %s", res.status_code, res.text[:500])
            raise ShopifyAPIError(f"Status: {res.status_code}", status_code=res.status_code)

        try:
            body = res.json()
        except ValueError as e:
            raise ShopifyAPIError("Shopify returned a non-JSON response", status_code=res.status_code) from e

        if body.get("errors"):
            logger.warning("Shopify GraphQL errors (%s): %s", self.shop, body["errors"])
            raise ShopifyAPIError("GraphQL errors", status_code=res.status_code, errors=body["errors"])
        return body.get("data") or {}

    # --- Customers ----------------------------------------------------
    def fetch_customer(self, customer_id) -> Optional[Dict[str, Any]]:
        data = self.graphql(CUSTOMER_QUERY, {"id": gid.to_gid(gid.CUSTOMER, customer_id)})
        return data.get("customer")

    def read_customer_metafield(self, customer_id, namespace: str, key: str) -> Optional[str]:
        data = self.graphql(
            CUSTOMER_METAFIELD_QUERY,
            {"id": gid.to_gid(gid.CUSTOMER, customer_id), "namespace": namespace, "key": key},
        )
        customer = data.get("customer") or {}
        return (customer.get("metafield") or {}).get("value")

    def set_customer_metafield(self, customer_id, namespace: str, key: str, value: str, type_: str = "json") -> List[Dict[str, Any]]:
        """metafieldsSet 실행. 반환: userErrors (빈 리스트면 성공)"""
        data = self.graphql(
            METAFIELDS_SET_MUTATION,
            {
                "metafields": [
                    {
                        "ownerId": gid.to_gid(gid.CUSTOMER, customer_id),
                        "namespace": namespace,
                        "key": key,
                        "type": type_,
                        "value": value,
                    }
                ]
            },
        )
        return (data.get("metafieldsSet") or {}).get("userErrors") or []

    # --- Products -----------------------------------------------------
    def fetch_products(self, product_ids) -> List[Dict[str, Any]]:
        ids = [gid.to_gid(gid.PRODUCT, pid) for pid in product_ids]
        if not ids:
            return []
        data = self.graphql(PRODUCTS_QUERY, {"ids": ids})
        # 삭제된 상품/다른 타입 노드는 null 또는 빈 객체로 온다
        return [node for node in (data.get("nodes") or []) if node and node.get("id")]

    def fetch_product(self, product_id) -> Optional[Dict[str, Any]]:
        data = self.graphql(PRODUCT_QUERY, {"id": gid.to_gid(gid.PRODUCT, product_id)})
        return data.get("product")
