"""Integration tests for the ``seed_customers`` management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from modules.customers.management.commands.seed_customers import SEED_CUSTOMERS
from modules.customers.models import CustomerModel

pytestmark = pytest.mark.integration


class TestSeedCustomers:
    def test_creates_demo_customers(self):
        out = StringIO()
        call_command("seed_customers", stdout=out)

        assert CustomerModel.objects.alive().count() == len(SEED_CUSTOMERS)
        assert f"created={len(SEED_CUSTOMERS)}" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_customers", stdout=StringIO())
        out = StringIO()
        call_command("seed_customers", stdout=out)

        assert CustomerModel.objects.count() == len(SEED_CUSTOMERS)
        assert "created=0" in out.getvalue()
        assert f"skipped={len(SEED_CUSTOMERS)}" in out.getvalue()
