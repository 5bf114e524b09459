from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model


class Command(BaseCommand):
    help = 'Create (or promote) a dashboard administrator account'

    def add_arguments(self, parser):
        parser.add_argument('username', help='Login name for the administrator')
        parser.add_argument('--email', default='', help='Email address (also accepted at login)')
        parser.add_argument('--password', help='Password to set; required when creating a new account')

    def handle(self, *args, **options):
        User = get_user_model()
        username = options['username']
        password = options.get('password')

        user = User.objects.filter(username=username).first()
        created = user is None
        if created:
            if not password:
                raise CommandError('--password is required when creating a new administrator')
            user = User(username=username)

        if options.get('email'):
            user.email = options['email']
        if password:
            user.set_password(password)
        user.role = User.ADMIN
        user.is_staff = True
        user.save()

        verb = 'Created' if created else 'Promoted'
        self.stdout.write(self.style.SUCCESS(f"{verb} administrator '{user.username}' (id={user.id})"))
