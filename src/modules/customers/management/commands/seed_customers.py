from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExistsEmailPhoneNumberError
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CreateCustomerUseCase

SEED_CUSTOMERS = [
    ("Ana Souza", "ana@example.com", "+5511987654321", Decimal("1500.00")),
    ("Bruno Lima", "bruno@example.com", "+5521912345678", Decimal("250.00")),
    ("Carla Mendes", "carla@example.com", "+34600111222", Decimal("0")),
    ("Daniel Costa", "daniel@example.com", "+34611222333", Decimal("980.50")),
    ("Eduardo Alves", "eduardo@example.com", "+14155550101", Decimal("75.25")),
    ("Fernanda Rocha", "fernanda@example.com", "+14155550102", Decimal("3200.00")),
    ("Gabriel Santos", "gabriel@example.com", "+447700900123", Decimal("10.00")),
    ("Helena Ferreira", "helena@example.com", "+447700900456", Decimal("640.00")),
]


class Command(BaseCommand):
    help = "Seed database with demo customers."

    def handle(self, *args, **options):
        self.stdout.write("Seeding customers...")
        use_case = CreateCustomerUseCase(CustomerDjangoRepository())

        created = skipped = 0
        for name, email, phone_number, credit in SEED_CUSTOMERS:
            dto = CreateCustomerDTO(
                name=name,
                email=email,
                phone_number=phone_number,
                initial_available_credit=credit,
            )
            try:
                use_case.execute(dto)
            except CustomerAlreadyExistsEmailPhoneNumberError:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, skipped={skipped}"
            )
        )
