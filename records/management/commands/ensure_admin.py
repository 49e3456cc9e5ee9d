# records/management/commands/ensure_admin.py
from django.core.management.base import BaseCommand, CommandError

from records.models import Admin
from records.serializers.auth import ROLES, SignupSerializer
from records.services.auth import hash_password
from records.validation import validate_payload


class Command(BaseCommand):
    help = "Create an admin account, or reset its password/role if it exists (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("password")
        parser.add_argument("--full-name", default="Administrator")
        parser.add_argument("--role", default="ADMIN", choices=ROLES)

    def handle(self, *args, **opts):
        result = validate_payload(SignupSerializer, {
            "fullName": opts["full_name"],
            "email": opts["email"],
            "password": opts["password"],
            "role": opts["role"],
        })
        if not result.ok:
            raise CommandError(result.error)
        v = result.value
        admin, created = Admin.objects.get_or_create(
            email=v["email"],
            defaults={
                "full_name": v["fullName"],
                "password": hash_password(v["password"]),
                "role": v["role"],
            },
        )
        if not created:
            admin.full_name = v["fullName"]
            admin.password = hash_password(v["password"])
            admin.role = v["role"]
            admin.save(update_fields=["full_name", "password", "role"])
        state = "created" if created else "updated"
        self.stdout.write(self.style.SUCCESS(f"{state}: {admin.email} ({admin.role})"))
