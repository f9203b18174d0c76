from rest_framework import serializers


class CustomerInfoSlimSerializer(serializers.Serializer):
    customerId = serializers.CharField()
    firstName = serializers.CharField(allow_blank=True)
    lastName = serializers.CharField(allow_blank=True)
    email = serializers.CharField(allow_blank=True)
    phone = serializers.CharField(allow_blank=True)
    ordersCount = serializers.IntegerField()
    totalSpent = serializers.CharField(required=False)


class WishlistCustomerSummarySerializer(serializers.Serializer):
    customerId = serializers.CharField()
    shop = serializers.CharField()
    productCount = serializers.IntegerField()
    lastAddedAt = serializers.DateTimeField()
    customerInfo = CustomerInfoSlimSerializer()


class WishlistDashboardSerializer(serializers.Serializer):
    customers = WishlistCustomerSummarySerializer(many=True)
    totalCustomers = serializers.IntegerField()
    totalProducts = serializers.IntegerField()
