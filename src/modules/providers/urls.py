"""Provider URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.providers.views import ProviderViewSet

router = DefaultRouter(trailing_slash=True)
router.register("providers", ProviderViewSet, basename="provider")

urlpatterns = router.urls
