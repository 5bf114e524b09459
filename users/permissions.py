from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """Allow access only to authenticated administrators (role == ADMIN) or staff users.

    Anonymous callers get 401 from the JWT authenticator's challenge; signed-in
    non-admins get 403.
    """
    message = 'Administrator access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'is_admin', False))
