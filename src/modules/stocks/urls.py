"""Stock URL configuration.

Besides the CRUD routes, exposes ``stocks/product/{product_id}/`` and
``stocks/serial/{serial}/``.
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.stocks.views import StockViewSet

router = DefaultRouter(trailing_slash=True)
router.register("stocks", StockViewSet, basename="stock")

urlpatterns = router.urls
