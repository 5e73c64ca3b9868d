from django.urls import path
from . import views

urlpatterns = [
    path('products', views.ProductListView.as_view(), name='product-list'),
    path('products/<uuid:product_id>', views.ProductDetailView.as_view(), name='product-detail'),
    path('orders', views.OrderListView.as_view(), name='order-list'),
    path('orders/<uuid:order_id>', views.OrderDetailView.as_view(), name='order-detail'),
]
