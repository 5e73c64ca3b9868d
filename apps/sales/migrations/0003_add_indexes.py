from django.db import migrations, models


class Migration(migrations.Migration):
    """
    Add indexes on the columns the list endpoints and order placement hit:
      - sales_product.category     (?category=... filter)
      - sales_product.created_at   (order=newest|oldest)
      - sales_product.price        (order=priceLowest|priceHighest)
      - sales_order.status         (status updates / admin filters)
      - sales_order.created_at     (order=newest|oldest)
      - sales_order_item.order_id  (JOIN sales_order ON order_id)
      - sales_order_item.product_id(JOIN sales_product ON product_id)
    """

    dependencies = [
        ('sales', '0002_order'),
    ]

    operations = [
        # sales_product
        migrations.AddIndex(
            model_name='product',
            index=models.Index(fields=['category'], name='sales_product_category_idx'),
        ),
        migrations.AddIndex(
            model_name='product',
            index=models.Index(fields=['created_at'], name='sales_product_created_at_idx'),
        ),
        migrations.AddIndex(
            model_name='product',
            index=models.Index(fields=['price'], name='sales_product_price_idx'),
        ),
        # sales_order
        migrations.AddIndex(
            model_name='order',
            index=models.Index(fields=['status'], name='sales_order_status_idx'),
        ),
        migrations.AddIndex(
            model_name='order',
            index=models.Index(fields=['created_at'], name='sales_order_created_at_idx'),
        ),
        # sales_order_item — FK join indexes
        migrations.AddIndex(
            model_name='orderitem',
            index=models.Index(fields=['order'], name='sales_orderitem_order_idx'),
        ),
        migrations.AddIndex(
            model_name='orderitem',
            index=models.Index(fields=['product'], name='sales_orderitem_product_idx'),
        ),
    ]
