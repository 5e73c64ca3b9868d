import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.querying import CREATED_ORDERINGS, apply_list_params
from apps.sales.models import Product
from apps.sales.serializers import OrderSerializer, ProductSerializer
from .models import User
from .serializers import SaveProductSerializer, UserSerializer

logger = logging.getLogger(__name__)


def _users():
    return User.objects.select_related('preference')


class UserListView(APIView):

    def get(self, request):
        users = apply_list_params(_users(), request.query_params, CREATED_ORDERINGS)
        return Response(UserSerializer(users, many=True).data)

    def post(self, request):
        serializer = UserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("USER CREATED — id: %s", user.id)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):

    def get(self, request, user_id):
        user = get_object_or_404(_users(), pk=user_id)
        return Response(UserSerializer(user).data)

    def patch(self, request, user_id):
        user = get_object_or_404(_users(), pk=user_id)
        serializer = UserSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def delete(self, request, user_id):
        user = get_object_or_404(User, pk=user_id)
        user.delete()
        logger.info("USER DELETED — id: %s", user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class UserSavedProductsView(APIView):

    def get(self, request, user_id):
        user = get_object_or_404(User, pk=user_id)
        return Response(ProductSerializer(user.saved_products.order_by('name'), many=True).data)

    def post(self, request, user_id):
        user = get_object_or_404(User, pk=user_id)
        serializer = SaveProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = get_object_or_404(Product, pk=serializer.validated_data['product_id'])
        user.saved_products.add(product)
        logger.info("PRODUCT SAVED — user: %s | product: %s", user.id, product.id)
        return Response(ProductSerializer(user.saved_products.order_by('name'), many=True).data)


class UserSavedProductDetailView(APIView):

    def delete(self, request, user_id, product_id):
        user = get_object_or_404(User, pk=user_id)
        product = get_object_or_404(user.saved_products.all(), pk=product_id)
        user.saved_products.remove(product)
        return Response(status=status.HTTP_204_NO_CONTENT)


class UserOrdersView(APIView):

    def get(self, request, user_id):
        user = get_object_or_404(User, pk=user_id)
        orders = apply_list_params(user.orders.prefetch_related('items'), request.query_params, CREATED_ORDERINGS)
        return Response(OrderSerializer(orders, many=True).data)
