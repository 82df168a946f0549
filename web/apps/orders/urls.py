from django.urls import path
from .views import OrdersPingView, OrdersCollectionView, RetrieveOrderView, OrderStatusView
from .views import OrdersByStatusView, OrderByCodeView, GenerateTestOrdersView, OrderStatisticsView
app_name = "orders"

urlpatterns = [
    path("ping/", OrdersPingView.as_view(), name="ping"),
    path("", OrdersCollectionView.as_view(), name="orders-collection"),  # GET list / POST create
    path("statistics/", OrderStatisticsView.as_view(), name="orders-statistics"),
    path("generate-test/", GenerateTestOrdersView.as_view(), name="orders-generate-test"),
    path("status/<str:order_status>/", OrdersByStatusView.as_view(), name="orders-by-status"),
    path("code/<str:unique_code>/", OrderByCodeView.as_view(), name="orders-by-code"),
    path("<int:oid>/", RetrieveOrderView.as_view(), name="orders-detail"),
    path("<int:oid>/status/", OrderStatusView.as_view(), name="orders-status"),
]
