from django.urls import include, path

urlpatterns = [
    path("api/v1/orders/", include("apps.orders.urls")),
    path("", include("apps.monitoring.urls")),
]

handler404 = "gateway.errors.not_found"
handler500 = "gateway.errors.server_error"
