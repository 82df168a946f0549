from django.db import models


class OrderModel(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending"
        PAID = "paid"
        CANCELLED = "cancelled"
        COMPLETED = "completed"

    id = models.BigAutoField(primary_key=True)
    product_id = models.PositiveIntegerField()
    product_name = models.CharField(max_length=255)
    price = models.PositiveIntegerField()
    # One row per code across the whole table, historical rows included
    unique_code = models.CharField(max_length=2, unique=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["created_at"], name="orders_created_at_idx"),
        ]

    def __str__(self):
        return f"Order {self.id} [{self.unique_code}] {self.status}"
