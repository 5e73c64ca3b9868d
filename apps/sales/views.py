import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.querying import CREATED_ORDERINGS, PRODUCT_ORDERINGS, apply_list_params
from .models import Order, Product
from .serializers import (
    OrderCreateSerializer,
    OrderDetailSerializer,
    OrderSerializer,
    OrderStatusSerializer,
    ProductSerializer,
)
from .services.order_placement import OrderPlacement

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────
#  Products
# ─────────────────────────────────────────
class ProductListView(APIView):

    def get(self, request):
        products = Product.objects.all()
        category = request.query_params.get('category')
        if category:
            products = products.filter(category=category)
        products = apply_list_params(products, request.query_params, PRODUCT_ORDERINGS)
        return Response(ProductSerializer(products, many=True).data)

    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        logger.info("PRODUCT CREATED — id: %s | stock: %d", product.id, product.stock)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):

    def get(self, request, product_id):
        product = get_object_or_404(Product, pk=product_id)
        return Response(ProductSerializer(product).data)

    def patch(self, request, product_id):
        product = get_object_or_404(Product, pk=product_id)
        serializer = ProductSerializer(product, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def delete(self, request, product_id):
        product = get_object_or_404(Product, pk=product_id)
        product.delete()
        logger.info("PRODUCT DELETED — id: %s", product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


# ─────────────────────────────────────────
#  Orders
# ─────────────────────────────────────────
class OrderListView(APIView):

    def get(self, request):
        orders = Order.objects.prefetch_related('items')
        orders = apply_list_params(orders, request.query_params, CREATED_ORDERINGS)
        return Response(OrderSerializer(orders, many=True).data)

    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = OrderPlacement().place(user_id=data['user_id'], items=data['order_items'])
        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)


class OrderDetailView(APIView):

    def get(self, request, order_id):
        order = get_object_or_404(Order.objects.prefetch_related('items__product'), pk=order_id)
        return Response(OrderDetailSerializer(order).data)

    def patch(self, request, order_id):
        order = get_object_or_404(Order, pk=order_id)
        serializer = OrderStatusSerializer(order, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("ORDER STATUS — id: %s | status: %s", order.id, order.status)
        order = Order.objects.prefetch_related('items').get(pk=order.pk)
        return Response(OrderSerializer(order).data)

    def delete(self, request, order_id):
        order = get_object_or_404(Order, pk=order_id)
        order.delete()
        logger.info("ORDER DELETED — id: %s", order_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
