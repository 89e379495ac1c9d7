from django.conf import settings

from .directory import ProtectedDirectory
from .reconciler import ProtectionReconciler
from .scheduler import ProtectionScheduler
from .state import ProtectionCheckState
from .uploads import UploadDir, relocate_upload_dir


class ProtectionService:
    """
    Point d'entrée du dossier protégé, construit explicitement et passé aux
    composants qui en ont besoin (middleware, formulaires, commandes).
    """

    def __init__(self, directory, origin, state, deny_extensions=()):
        self.directory = directory
        self.origin = origin
        self.state = state
        self.reconciler = ProtectionReconciler(directory, origin, state, deny_extensions)
        self.scheduler = ProtectionScheduler(self.reconciler)

    @classmethod
    def from_settings(cls):
        state = ProtectionCheckState(
            ttl=getattr(settings, "PROTECTED_MEDIA_CHECK_TTL", 60 * 60 * 24),
            cache_alias=getattr(settings, "PROTECTED_MEDIA_CACHE_ALIAS", "default"),
        )
        return cls(
            directory=ProtectedDirectory.from_settings(),
            origin=settings.SITE_URL,
            state=state,
            deny_extensions=getattr(settings, "PROTECTED_MEDIA_DENY_EXTENSIONS", ()),
        )

    def reconcile(self, force=False):
        return self.reconciler.reconcile(force=force)

    def upload_directory(self, proposed=None):
        """Destination d'un upload du champ géré (par défaut : racine des médias)."""
        if proposed is None:
            proposed = UploadDir(basedir=self.directory.root, baseurl=self.directory.base_url)
        return relocate_upload_dir(proposed, self.directory.segment)
