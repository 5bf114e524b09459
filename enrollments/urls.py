from core.routers import OptionalSlashRouter
from .views import EnrollmentViewSet

router = OptionalSlashRouter()
router.register(r'enrollments', EnrollmentViewSet, basename='enrollment')

urlpatterns = router.urls
