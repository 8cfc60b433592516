from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.core.repositories.exceptions import ConflictError
from modules.products.models import Gender
from modules.products.repositories.django_repository import ProductDjangoRepository

CATALOG = [
    ("Men's Chill Crew Neck Sweatshirt", Gender.MEN, Decimal("75.00"), ["sweatshirt"]),
    ("Men's Quilted Shirt Jacket", Gender.MEN, Decimal("200.00"), ["jacket"]),
    ("Men's Raven Lightweight Zip Up Bomber", Gender.MEN, Decimal("130.00"), ["jacket"]),
    ("Men's Turbine Long Sleeve Tee", Gender.MEN, Decimal("45.00"), ["shirt"]),
    ("Women's Cropped Puffer Jacket", Gender.WOMEN, Decimal("225.00"), ["hoodie"]),
    ("Women's Chill Half Zip Cropped Hoodie", Gender.WOMEN, Decimal("130.00"), ["hoodie"]),
    ("Women's Raven Slouchy Crew Sweatshirt", Gender.WOMEN, Decimal("110.00"), ["hoodie"]),
    ("Women's Turbine Cropped Long Sleeve Tee", Gender.WOMEN, Decimal("45.00"), ["shirt"]),
    ("Kids Cybertruck Long Sleeve Tee", Gender.KID, Decimal("30.00"), ["shirt"]),
    ("Kids Racing Stripe Tee", Gender.KID, Decimal("30.00"), ["shirt"]),
    ("Kids 3D T Logo Tee", Gender.KID, Decimal("30.00"), ["shirt"]),
    ("Unisex Cyberquad Hoodie", Gender.UNISEX, Decimal("90.00"), ["hoodie"]),
]

SIZES = ["XS", "S", "M", "L", "XL", "XXL"]


class Command(BaseCommand):
    help = "Seed database with a development product catalog."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products_created = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: users={users_created}, products={products_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        if User.objects.filter(username="admin").exists():
            return 0
        User.objects.create_superuser("admin", password="admin123")
        return 1

    def _seed_products(self) -> int:
        self.stdout.write("Creating products...")
        repo = ProductDjangoRepository()
        created = 0
        for title, gender, price, tags in CATALOG:
            product = repo.build(
                {
                    "title": title,
                    "gender": gender,
                    "price": price,
                    "stock": random.randint(0, 50),
                    "sizes": random.sample(SIZES, k=3),
                    "tags": tags,
                }
            )
            try:
                repo.save(product)
            except ConflictError:
                # already seeded
                continue
            created += 1
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return created
