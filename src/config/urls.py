from drf_spectacular.views import SpectacularAPIView

from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules
    path("api/", include("modules.products.urls")),
    path("api/", include("modules.users.urls")),
    path("api/", include("modules.providers.urls")),
    path("api/", include("modules.stocks.urls")),
    # OpenAPI schema (public)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
]
