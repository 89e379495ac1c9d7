import logging

from django.http import JsonResponse
from django.shortcuts import get_object_or_404, render

from .models import Page
from .serializers import PageFileSerializer

logger = logging.getLogger(__name__)


def _page_files(page):
    """Lignes affichables : type de page concerné et fichier présent."""
    if not page.accepts_files:
        return []
    entries = page.files.select_related('file', 'image')
    return [entry for entry in entries if entry.file.file]


def page_detail(request, slug):
    page = get_object_or_404(Page, slug=slug, published=True)
    ctx = {
        'page': page,
        'files': _page_files(page),
    }
    return render(request, 'pages/page_detail.html', ctx)


def page_files(request, slug):
    """
    Liste des fichiers d'une page en JSON (titre, description, vignette, fichier).
    Les URLs renvoyées restent soumises au contrôle du Referer côté serveur web.
    """
    page = get_object_or_404(Page, slug=slug, published=True)
    files = _page_files(page)
    serializer = PageFileSerializer(files, many=True, context={'request': request})
    logger.debug(f"{len(files)} fichier(s) listé(s) pour la page {page.slug}")
    return JsonResponse({'ok': True, 'page': page.slug, 'files': serializer.data})
