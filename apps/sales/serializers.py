from decimal import Decimal

from rest_framework import serializers

from .models import Order, OrderItem, Product

# Upper bound of the positive integer columns (stock, quantity)
MAX_QUANTITY = 2147483647


class ProductSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=1, max_length=60)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    stock = serializers.IntegerField(min_value=0, max_value=MAX_QUANTITY)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = ('id', 'name', 'description', 'category', 'price', 'stock', 'createdAt', 'updatedAt')
        read_only_fields = ('id',)


class OrderItemSerializer(serializers.ModelSerializer):
    orderId = serializers.UUIDField(source='order_id', read_only=True)
    productId = serializers.UUIDField(source='product_id', read_only=True)
    unitPrice = serializers.DecimalField(source='unit_price', max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ('id', 'orderId', 'productId', 'quantity', 'unitPrice')
        read_only_fields = fields


class OrderItemDetailSerializer(OrderItemSerializer):
    product = ProductSerializer(read_only=True)

    class Meta(OrderItemSerializer.Meta):
        fields = OrderItemSerializer.Meta.fields + ('product',)
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    userId = serializers.UUIDField(source='user_id', read_only=True)
    orderItems = OrderItemSerializer(source='items', many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = ('id', 'userId', 'status', 'orderItems', 'createdAt', 'updatedAt')
        read_only_fields = fields


class OrderDetailSerializer(OrderSerializer):
    orderItems = OrderItemDetailSerializer(source='items', many=True, read_only=True)
    total = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ('total',)
        read_only_fields = fields


# ── Request bodies ────────────────────────────────────────────────

class OrderItemInputSerializer(serializers.Serializer):
    productId = serializers.UUIDField(source='product_id')
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False,
    )


class OrderCreateSerializer(serializers.Serializer):
    userId = serializers.UUIDField(source='user_id')
    orderItems = OrderItemInputSerializer(source='order_items', many=True, allow_empty=False)


class OrderStatusSerializer(serializers.ModelSerializer):
    """PATCH /orders/<id>: only `status` may change."""

    class Meta:
        model = Order
        fields = ('status',)
        extra_kwargs = {'status': {'required': True}}

    def validate(self, attrs):
        unexpected = sorted(set(self.initial_data) - set(self.fields))
        if unexpected:
            raise serializers.ValidationError(
                {key: ['This field cannot be updated.'] for key in unexpected}
            )
        return attrs

    def validate_status(self, value):
        current = self.instance.status if self.instance is not None else None
        if current in Order.TERMINAL_STATUSES and value != current:
            raise serializers.ValidationError("Order is already {}.".format(current))
        return value
