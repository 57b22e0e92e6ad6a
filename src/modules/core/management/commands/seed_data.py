from __future__ import annotations

import random
from datetime import date, timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.products.models import ProductRow
from modules.providers.models import ProviderRow
from modules.stocks.models import StockRow
from modules.users.models import UserRow


class Command(BaseCommand):
    help = "Seed the relational backend with sample inventory data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--stocks-per-product",
            type=int,
            default=3,
            help="Stock items created for each seeded product.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding inventory data...")

        with transaction.atomic():
            users = self._seed_users()
            providers = self._seed_providers()
            products = self._seed_products()
            stocks_created = self._seed_stocks(
                products, providers, users, options["stocks_per_product"]
            )

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={len(users)}, "
                f"providers={len(providers)}, "
                f"products={len(products)}, "
                f"stocks={stocks_created}"
            )
        )

    def _seed_users(self) -> list[UserRow]:
        self.stdout.write("Creating users...")
        now = timezone.now()
        users: list[UserRow] = []
        seed_users = [
            ("Ana Souza", "ana@example.com", "admin"),
            ("Bruno Lima", "bruno@example.com", "operator"),
            ("Carla Mendes", "carla@example.com", "operator"),
        ]
        for name, email, role in seed_users:
            user, _ = UserRow.objects.get_or_create(
                email=email,
                defaults={
                    "name": name,
                    "role": role,
                    "password": "changeme",
                    "created_at": now,
                    "updated_at": now,
                },
            )
            users.append(user)
        return users

    def _seed_providers(self) -> list[ProviderRow]:
        self.stdout.write("Creating providers...")
        now = timezone.now()
        providers: list[ProviderRow] = []
        seed_providers = [
            ("Distribuidora Norte", "vendas@norte.example.com", "+55 11 4000-1000"),
            ("Tech Supply", "contato@techsupply.example.com", "+55 21 3000-2000"),
        ]
        for name, email, phone in seed_providers:
            provider, _ = ProviderRow.objects.get_or_create(
                email=email,
                defaults={
                    "name": name,
                    "phone": phone,
                    "address": "",
                    "created_at": now,
                    "updated_at": now,
                },
            )
            providers.append(provider)
        return providers

    def _seed_products(self) -> list[ProductRow]:
        self.stdout.write("Creating products...")
        now = timezone.now()
        products: list[ProductRow] = []
        catalog = [
            ("ELET-001", 'Monitor 27"'),
            ("ELET-002", "Teclado Mecânico"),
            ("ELET-003", "Mouse Gamer"),
            ("MOV-001", "Cadeira Ergonômica"),
            ("OFF-001", "Calculadora"),
        ]
        for code, name in catalog:
            product, _ = ProductRow.objects.get_or_create(
                code=code,
                defaults={
                    "name": name,
                    "image_url": "",
                    "created_at": now,
                    "updated_at": now,
                },
            )
            products.append(product)
        return products

    def _seed_stocks(
        self,
        products: list[ProductRow],
        providers: list[ProviderRow],
        users: list[UserRow],
        per_product: int,
    ) -> int:
        self.stdout.write("Creating stocks...")
        now = timezone.now()
        created = 0
        for product in products:
            for n in range(1, per_product + 1):
                user = random.choice(users)
                _, was_created = StockRow.objects.get_or_create(
                    serial=f"{product.code}-SN-{n:04d}",
                    defaults={
                        "product": product,
                        "provider": random.choice(providers),
                        "created_by_user": user,
                        "updated_by_user": user,
                        "batch": f"L{now:%Y%m}",
                        "purchase_date": date.today()
                        - timedelta(days=random.randint(1, 180)),
                        "created_at": now,
                        "updated_at": now,
                    },
                )
                created += int(was_created)
        return created
