"""
URL configuration for the service marketplace backend.
All API endpoints are registered under the `/api/` prefix.
Authentication endpoints are nested under `/api/auth/`.
"""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from django.conf import settings
from django.conf.urls.static import static

from users.views import UserSearchView


urlpatterns = [
    path("admin/", admin.site.urls),

    path("api/", RedirectView.as_view(pattern_name="swagger-ui", permanent=False)),

    #  Swagger
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    # Auth endpoints
    path("api/auth/", include("users.urls")),
    path("api/users/search/", UserSearchView.as_view(), name="user-search"),
    path("api/messages/", include("messaging.urls")),
]

if settings.DEBUG and getattr(settings, "MEDIA_URL", "").startswith("/"):
    # Only serve MEDIA_URL via Django if it's a local path (avoid trying to serve S3)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
