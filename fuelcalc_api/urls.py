from django.http import JsonResponse
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)


def root(_request):
    return JsonResponse(
        {
            "service": "fuel-calculator-api",
            "status": "ok",
            "endpoints": {
                "fuel_cost": {"method": "POST", "path": "/api/fuel-cost/"},
                "round_trip": {"method": "POST", "path": "/api/round-trip/"},
                "compare": {"method": "POST", "path": "/api/compare/"},
                "fuel_needed": {"method": "POST", "path": "/api/fuel-needed/"},
                "max_distance": {"method": "POST", "path": "/api/max-distance/"},
                "convert_efficiency": {"method": "POST", "path": "/api/convert-efficiency/"},
                "efficiency_category": {"method": "POST", "path": "/api/efficiency-category/"},
                "annual_cost": {"method": "POST", "path": "/api/annual-cost/"},
                "schema": "/api/schema/",
                "swagger_ui": "/api/docs/swagger/",
                "redoc": "/api/docs/redoc/",
            },
        }
    )


urlpatterns = [
    path("", root),
    path("api/", include("calculator.api.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="api-schema"),
    path(
        "api/docs/swagger/",
        SpectacularSwaggerView.as_view(url_name="api-schema"),
        name="api-docs-swagger",
    ),
    path(
        "api/docs/redoc/",
        SpectacularRedocView.as_view(url_name="api-schema"),
        name="api-docs-redoc",
    ),
]
