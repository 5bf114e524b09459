from core.routers import OptionalSlashRouter
from .views import OfferViewSet

router = OptionalSlashRouter()
router.register(r'offers', OfferViewSet, basename='offer')

urlpatterns = router.urls
