from django.urls import re_path

from .views import CustomerSyncAPI

urlpatterns = [
    re_path(r"^customer/?$", CustomerSyncAPI.as_view(), name="customer-sync"),
]
