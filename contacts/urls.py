from core.routers import OptionalSlashRouter
from .views import ContactViewSet

router = OptionalSlashRouter()
router.register(r'contacts', ContactViewSet, basename='contact')

urlpatterns = router.urls
