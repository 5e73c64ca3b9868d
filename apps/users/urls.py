from django.urls import path
from . import views

urlpatterns = [
    path('users', views.UserListView.as_view(), name='user-list'),
    path('users/<uuid:user_id>', views.UserDetailView.as_view(), name='user-detail'),
    path('users/<uuid:user_id>/saved-products', views.UserSavedProductsView.as_view(), name='user-saved-products'),
    path(
        'users/<uuid:user_id>/saved-products/<uuid:product_id>',
        views.UserSavedProductDetailView.as_view(),
        name='user-saved-product-detail',
    ),
    path('users/<uuid:user_id>/orders', views.UserOrdersView.as_view(), name='user-orders'),
]
