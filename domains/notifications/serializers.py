from rest_framework import serializers

SUMMARY = "summary"
PRODUCT = "product"


class SendEmailRequestSerializer(serializers.Serializer):
    customerId = serializers.CharField(required=False, allow_blank=True)
    shop = serializers.CharField(required=False, allow_blank=True)
    emailType = serializers.CharField(required=False, allow_blank=True)
    productId = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class SendEmailResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField(required=False)
    error = serializers.CharField(required=False)
    details = serializers.DictField(required=False)
