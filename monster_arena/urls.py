from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("arena.urls")),          # /health and /api/...
]

handler404 = "arena.views.not_found_view"
