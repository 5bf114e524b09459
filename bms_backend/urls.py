from django.contrib import admin
from django.urls import path, re_path, include
from .views import index, health

urlpatterns = [
    path('', index, name='index'),
    path('admin/', admin.site.urls),
    re_path(r'^api/health/?$', health, name='health'),
    path('api/admin/', include('users.urls')),
    path('api/', include('contacts.urls')),
    path('api/', include('enrollments.urls')),
    path('api/', include('offers.urls')),
    path('api/', include('certificates.urls')),
]
