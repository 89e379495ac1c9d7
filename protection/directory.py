import os
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ValidationError

HTACCESS_NAME = ".htaccess"
SENTINEL_NAME = "index.html"
SENTINEL_CONTENT = "<!-- Silence is golden. -->\n"


@dataclass(frozen=True)
class ProtectedDirectory:
    """
    Dossier d'upload protégé : chemin absolu + URL publique correspondante.

    `segment` est le nom du dossier sous la racine des médias ; c'est lui qui
    sert de marqueur d'appartenance (recherche dans l'URL résolue d'un fichier).
    """
    root: str
    base_url: str
    segment: str = "protected_uploads"

    @classmethod
    def from_settings(cls):
        return cls(
            root=str(settings.MEDIA_ROOT),
            base_url=settings.MEDIA_URL,
            segment=getattr(settings, "PROTECTED_MEDIA_DIRECTORY", "protected_uploads"),
        )

    @property
    def path(self):
        return os.path.join(self.root, self.segment)

    @property
    def url(self):
        return self.base_url.rstrip("/") + "/" + self.segment

    @property
    def htaccess_path(self):
        return os.path.join(self.path, HTACCESS_NAME)

    @property
    def sentinel_path(self):
        return os.path.join(self.path, SENTINEL_NAME)

    def contains_url(self, url):
        # Sous-chaîne et non préfixe : l'URL peut être réécrite en amont (CDN, proxy)
        return bool(url) and self.segment in url

    def validation_message(self):
        return (
            f"Ce fichier n'est pas dans le dossier {self.segment} et n'est peut-être pas protégé. "
            f"Veuillez téléverser un nouveau fichier ou en choisir un dans le dossier {self.segment}."
        )

    def validate_url(self, url):
        if not self.contains_url(url):
            raise ValidationError(self.validation_message(), code="not_protected")
