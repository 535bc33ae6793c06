from django.core.management.base import BaseCommand, CommandError

from users.models import User, normalize_email


class Command(BaseCommand):
    help = "Assign a role (free, paid, admin) to a user, keeping the admin flag in sync."

    def add_arguments(self, parser):
        parser.add_argument("email")
        parser.add_argument("role", choices=[choice for choice, _ in User.ROLE_CHOICES])

    def handle(self, *args, **options):
        email = normalize_email(options["email"])
        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise CommandError(f"User {email} does not exist.")

        previous = user.role
        user.set_role(options["role"])
        user.save(update_fields=["role", "is_admin"])
        self.stdout.write(self.style.SUCCESS(f"User {email} updated from role {previous} to {user.role}"))
