"""Main URL mapping configuration file.

Include other URLConfs from external apps using method `include()`.
"""

from django.contrib import admin
from django.urls import include, path

from server.views import health_check

urlpatterns = [
    # Apps:
    path('api/files/', include('server.apps.s2files.api.urls', namespace='s2files')),
    path('api/rooms/', include('server.apps.rooms.urls', namespace='rooms')),

    # Health checks:
    path('api/health/', health_check, name='health'),

    # Django admin:
    path('admin/', admin.site.urls),
]
