from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, permissions, status, viewsets
from rest_framework.response import Response

from users.permissions import IsAdmin


class ResourceViewSet(viewsets.GenericViewSet):
    """HTTP surface for a ResourceService.

    Every action is admin-only unless listed in `public_actions`. PUT and
    PATCH both apply a partial update through the service's whitelist.
    """
    service_class = None
    serializer_class = None
    public_actions = ()
    lookup_value_regex = r'\d+'
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    search_fields = ()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.service = self.service_class()

    def get_permissions(self):
        if self.action in self.public_actions:
            permission_classes = [permissions.AllowAny]
        else:
            permission_classes = [IsAdmin]
        return [permission() for permission in permission_classes]

    def get_queryset(self):
        return self.service.list()

    def list(self, request):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        instance = self.service.get(pk)
        return Response(self.get_serializer(instance).data)

    def create(self, request):
        instance = self.service.create(request.data)
        return Response(self.created_payload(instance), status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        instance = self.service.update_by_id(pk, request.data)
        return Response(self.get_serializer(instance).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        message = self.service.delete_by_id(pk)
        return Response({'message': message})

    def created_payload(self, instance):
        return self.get_serializer(instance).data
