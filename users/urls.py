from django.urls import re_path
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
)
from .views import MeView, DashboardView

urlpatterns = [
    re_path(r'^token/?$', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    re_path(r'^token/refresh/?$', TokenRefreshView.as_view(), name='token_refresh'),
    re_path(r'^me/?$', MeView.as_view(), name='me'),
    re_path(r'^dashboard/?$', DashboardView.as_view(), name='dashboard'),
]
