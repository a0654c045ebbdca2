import os
from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model


class Command(BaseCommand):
    help = 'Create the first super admin if it does not exist'

    def add_arguments(self, parser):
        parser.add_argument('--email', default=os.environ.get('ADMIN_EMAIL'))
        parser.add_argument('--name', default=os.environ.get('ADMIN_NAME', 'Administrator'))
        parser.add_argument('--password', default=os.environ.get('ADMIN_PASSWORD'))

    def handle(self, *args, **options):
        User = get_user_model()
        email = options['email']
        password = options['password']

        if not email or not password:
            raise CommandError('Provide --email and --password (or ADMIN_EMAIL / ADMIN_PASSWORD)')

        # Check if admin user exists
        if User.objects.filter(email__iexact=email).exists():
            self.stdout.write(self.style.WARNING(f'Admin {email} already exists'))
            return

        User.objects.create_superuser(email=email, password=password, name=options['name'])

        self.stdout.write(self.style.SUCCESS(f'Super admin created: {email}'))
