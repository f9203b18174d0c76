from rest_framework import serializers


class ProductsRequestSerializer(serializers.Serializer):
    productIds = serializers.ListField(
        child=serializers.CharField(),
        allow_empty=True,
        error_messages={"required": "productIds array is required.", "not_a_list": "productIds array is required."},
    )
    shop = serializers.CharField(error_messages={"required": "Shop domain is required.", "blank": "Shop domain is required."})


class WishlistProductSerializer(serializers.Serializer):
    id = serializers.CharField()
    productId = serializers.CharField()
    title = serializers.CharField(allow_null=True)
    vendor = serializers.CharField(allow_null=True)
    handle = serializers.CharField()
    url = serializers.CharField()
    image = serializers.CharField(allow_null=True)
    price = serializers.IntegerField()
    compareAtPrice = serializers.IntegerField(allow_null=True)
    available = serializers.BooleanField()
    variantId = serializers.CharField(allow_null=True)


class ProductsResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    products = WishlistProductSerializer(many=True)
    count = serializers.IntegerField()
