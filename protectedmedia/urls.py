from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

# Personnalisation légère de l'admin (titres)
admin.site.site_header = "Fichiers protégés — Backoffice"
admin.site.site_title = "Fichiers protégés — Backoffice"
admin.site.index_title = "Tableau de bord"

urlpatterns = [
    # Interface d'édition des pages et des médias
    path('gestion/', admin.site.urls),

    # Site public
    path('', include('core.urls')),
    path('pages/', include('pages.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
