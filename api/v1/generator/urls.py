"""
URL configuration for generator API endpoints.
"""

from django.urls import path

from api.v1.generator import views

app_name = "generators"

urlpatterns = [
    path(
        "generators",
        views.GeneratorListView.as_view(),
        name="generator-list",
    ),
    path(
        "generators/<str:generator_id>",
        views.GeneratorDetailView.as_view(),
        name="generator-detail",
    ),
]
