from rest_framework.routers import SimpleRouter


class OptionalSlashRouter(SimpleRouter):
    """SimpleRouter whose routes match with or without a trailing slash."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = '/?'
