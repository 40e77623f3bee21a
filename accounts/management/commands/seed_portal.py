from django.core.management.base import BaseCommand

from accounts.seed import seed_portal


class Command(BaseCommand):
    help = "Create the default users, categories and vault categories if they are missing."

    def handle(self, *args, **options):
        summary = seed_portal()
        users = ", ".join(summary["users"]) or "none"
        self.stdout.write(self.style.SUCCESS(
            f"Users created: {users}; categories: {summary['tabs']}; "
            f"vault categories: {summary['vault_tabs']}; profiles: {summary['profiles']}"
        ))
