import uuid

import django.db.models.deletion
import django_fsm
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Transaction",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "deleted_at",
                    models.DateTimeField(
                        blank=True,
                        db_index=True,
                        help_text="Timestamp when this record was soft deleted",
                        null=True,
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "coelsa_id",
                    models.CharField(
                        blank=True,
                        help_text="Operation identifier assigned by COELSA",
                        max_length=100,
                        null=True,
                        unique=True,
                    ),
                ),
                (
                    "status",
                    django_fsm.FSMField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("error", "Error"),
                            ("reversed", "Reversed"),
                        ],
                        db_index=True,
                        default="pending",
                        max_length=50,
                    ),
                ),
                ("amount", models.DecimalField(decimal_places=2, max_digits=18)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("cashin_coelsa", "Cash-in (COELSA)"),
                            ("cashout_coelsa", "Cash-out (COELSA)"),
                            ("refound_coelsa", "Refund (COELSA)"),
                            ("transfer", "Internal transfer"),
                            ("payment", "Payment"),
                        ],
                        db_index=True,
                        max_length=30,
                    ),
                ),
                ("currency", models.CharField(default="ARS", max_length=3)),
                ("country", models.CharField(default="ar", max_length=2)),
                ("code", models.CharField(blank=True, default="", max_length=50)),
                ("reference", models.CharField(blank=True, default="", max_length=255)),
                ("reason", models.CharField(blank=True, default="", max_length=255)),
                (
                    "reverse_coelsa_id",
                    models.CharField(
                        blank=True,
                        help_text="COELSA identifier of the reversal operation",
                        max_length=100,
                        null=True,
                    ),
                ),
                (
                    "source_account",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="outgoing_transactions",
                        to="accounts.useraccount",
                    ),
                ),
                (
                    "target_account",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="incoming_transactions",
                        to="accounts.useraccount",
                    ),
                ),
            ],
            options={
                "db_table": "transactions",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["type", "-created_at"], name="txn_type_created_idx"
                    )
                ],
            },
        ),
    ]
