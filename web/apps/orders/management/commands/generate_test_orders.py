from django.core.management.base import BaseCommand, CommandError

from apps.orders import providers
from apps.orders.schemas import MAX_TEST_ORDERS


class Command(BaseCommand):
    help = "Creates COUNT orders for random test products, each with its own unique code."

    def add_arguments(self, parser):
        parser.add_argument("--count", type=int, default=50)

    def handle(self, *args, **options):
        count = options["count"]
        if not 1 <= count <= MAX_TEST_ORDERS:
            raise CommandError(f"--count must be between 1 and {MAX_TEST_ORDERS}")

        service = providers.get_order_service()
        result = service.generate_test_orders(count)
        self.stdout.write(self.style.SUCCESS(result.message))

        stats = service.allocator.statistics()
        self.stdout.write(f"Codes in use: {stats.used_codes}/{stats.total_codes}")
        if result.data["created"] < count:
            self.stdout.write(self.style.WARNING(
                f"{count - result.data['created']} orders were not created (code pool exhausted?)"
            ))
