from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model
from django.db.models import Q

User = get_user_model()


class EmailOrUsernameModelBackend(ModelBackend):
    """
    Let dashboard admins sign in with either their username or their email
    address. Used by the token endpoint as well as the Django admin login.
    """
    def authenticate(self, request, username=None, password=None, **kwargs):
        if username is None:
            username = kwargs.get(User.USERNAME_FIELD)
        if not username or password is None:
            return None

        user = (
            User.objects.filter(Q(username__iexact=username) | Q(email__iexact=username))
            .order_by('id')
            .first()
        )
        if user is None:
            # Run the hasher anyway so unknown accounts take as long as wrong passwords
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
