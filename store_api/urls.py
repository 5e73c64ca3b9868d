from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('apps.users.urls')),
    path('', include('apps.sales.urls')),
]

handler404 = 'apps.core.handlers.not_found'
