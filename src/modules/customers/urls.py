"""Customer routes, mounted under ``/api/v1/``."""

from rest_framework.routers import SimpleRouter

from modules.customers.views import CustomerViewSet

router = SimpleRouter()
router.trailing_slash = "/?"
router.register("customers", CustomerViewSet, basename="customer")

urlpatterns = router.urls
