import logging

from django.urls import reverse

from protection.service import ProtectionService

logger = logging.getLogger(__name__)


class ProtectionCheckMiddleware:
    """
    Revérifie les fichiers de protection du dossier d'upload lors des
    chargements de pages d'administration (staff connecté).
    Le TTL de l'état de vérification évite tout travail disque à chaque requête.
    """

    def __init__(self, get_response, service=None):
        self.get_response = get_response
        self.service = service or ProtectionService.from_settings()

    def __call__(self, request):
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated and user.is_staff:
            if request.path.startswith(reverse("admin:index")):
                try:
                    self.service.scheduler.tick()
                except Exception:
                    # ex. cache indisponible : la page d'admin doit rester accessible
                    logger.exception("Vérification des fichiers de protection impossible")

        return self.get_response(request)
