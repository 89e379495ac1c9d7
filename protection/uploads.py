import os
from typing import NamedTuple

from django.conf import settings
from django.utils import timezone


class UploadDir(NamedTuple):
    """Destination proposée pour un upload en cours : dossier absolu + URL."""
    basedir: str
    baseurl: str


def relocate_upload_dir(upload_dir, segment):
    """
    Redirige un upload vers le dossier protégé.
    Aucune vérification du contenu : seule la destination change.
    """
    return UploadDir(
        basedir=upload_dir.basedir.rstrip("/") + "/" + segment,
        baseurl=upload_dir.baseurl.rstrip("/") + "/" + segment,
    )


def default_upload_dir(now=None):
    # MEDIA_ROOT/YYYY/MM, comme la médiathèque classique
    today = now or timezone.now()
    shard = f"{today.year}/{today.month:02d}"
    return UploadDir(
        basedir=os.path.join(str(settings.MEDIA_ROOT), shard),
        baseurl=settings.MEDIA_URL.rstrip("/") + "/" + shard,
    )


def media_upload_to(instance, filename):
    """
    `upload_to` des médias : le fichier va dans `instance.upload_dir` s'il a été
    fixé (upload relocalisé), sinon dans le dossier daté par défaut.
    """
    upload_dir = getattr(instance, "upload_dir", None) or default_upload_dir()
    relative = os.path.relpath(upload_dir.basedir, str(settings.MEDIA_ROOT))
    if relative in (".", ""):
        return filename
    return os.path.join(relative, filename).replace(os.sep, "/")
