import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from apps.sales.exceptions import InsufficientStock
from apps.sales.models import Product, Order, OrderItem
from apps.sales.services.order_placement import OrderPlacement
from apps.users.models import User, UserPreference


PRODUCTS = [
    ('Wool Overcoat', Product.Category.FASHION, '189.00'),
    ('Linen Shirt', Product.Category.FASHION, '49.90'),
    ('Vitamin C Serum', Product.Category.BEAUTY, '24.50'),
    ('Yoga Mat', Product.Category.SPORTS, '35.00'),
    ('Running Shoes', Product.Category.SPORTS, '119.99'),
    ('Wireless Earbuds', Product.Category.ELECTRONICS, '89.00'),
    ('Floor Lamp', Product.Category.HOME_INTERIOR, '64.00'),
    ('Laundry Detergent', Product.Category.HOUSEHOLD_SUPPLIES, '12.99'),
    ('Cast Iron Skillet', Product.Category.KITCHENWARE, '42.00'),
    ('Chef Knife', Product.Category.KITCHENWARE, '75.00'),
]

CUSTOMERS = [
    ('Alice', 'Johnson', 'alice@example.com'),
    ('Bob', 'Smith', 'bob@example.com'),
    ('Carol', 'White', 'carol@example.com'),
    ('David', 'Brown', 'david@example.com'),
    ('Eva', 'Davis', 'eva@example.com'),
]


class Command(BaseCommand):
    help = 'Seed sample users, products and orders'

    def add_arguments(self, parser):
        parser.add_argument('--orders', type=int, default=20, help='Number of orders to attempt')
        parser.add_argument('--stock', type=int, default=25, help='Initial stock for new products')
        parser.add_argument('--seed', type=int, default=None, help='Random seed for repeatable data')
        parser.add_argument('--clear', action='store_true', help='Clear existing data first')

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        if options['clear']:
            OrderItem.objects.all().delete()
            Order.objects.all().delete()
            User.objects.all().delete()
            Product.objects.all().delete()
            self.stdout.write(self.style.WARNING('Cleared existing data.'))

        products = []
        for name, category, price in PRODUCTS:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={'category': category, 'price': Decimal(price), 'stock': options['stock']},
            )
            products.append(product)
        self.stdout.write(f'Products ready: {len(products)}')

        users = []
        for first_name, last_name, email in CUSTOMERS:
            user, created = User.objects.get_or_create(
                email=email,
                defaults={'first_name': first_name, 'last_name': last_name},
            )
            if created:
                UserPreference.objects.create(user=user, receive_email=rng.random() < 0.5)
            users.append(user)
        self.stdout.write(f'Users ready: {len(users)}')

        placement = OrderPlacement()
        placed = rejected = 0
        for _ in range(options['orders']):
            # 1-3 lines per order, prices taken from the product at placement time
            items = [
                {'product_id': product.pk, 'quantity': rng.randint(1, 3)}
                for product in rng.sample(products, rng.randint(1, 3))
            ]
            try:
                placement.place(rng.choice(users).pk, items)
            except InsufficientStock:
                rejected += 1
                continue
            placed += 1

        self.stdout.write(self.style.SUCCESS(
            f'Placed {placed} orders ({rejected} rejected for insufficient stock).'
        ))
