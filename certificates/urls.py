from core.routers import OptionalSlashRouter
from .views import CertificateViewSet

router = OptionalSlashRouter()
router.register(r'certificates', CertificateViewSet, basename='certificate')

urlpatterns = router.urls
