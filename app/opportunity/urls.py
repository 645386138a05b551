from django.urls import include, path
from opportunity.views import OpportunityViewSet
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"", OpportunityViewSet, basename="opportunity")

urlpatterns = [
    path("", include(router.urls)),
]
