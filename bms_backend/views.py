from django.http import HttpResponse
from rest_framework import permissions
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.response import Response


def index(request):
    return HttpResponse('API is running...', content_type='text/plain')


@api_view(['GET'])
@authentication_classes([])
@permission_classes([permissions.AllowAny])
def health(request):
    return Response({'status': 'OK'})
