import logging
import os

from django import forms
from django.conf import settings
from django.core.validators import FileExtensionValidator
from django.db import transaction

from protection.service import ProtectionService
from protection.uploads import UploadDir
from .models import MediaItem, PageFile

logger = logging.getLogger(__name__)


def validate_upload_extension(value):
    extensions = getattr(settings, "PROTECTED_MEDIA_FILE_EXTENSIONS", None)
    if extensions:
        FileExtensionValidator(list(extensions))(value)


def store_protected_upload(uploaded, service=None):
    """
    Enregistre un fichier téléversé depuis la liste de fichiers d'une page.
    La destination proposée par le stockage est redirigée vers le dossier
    protégé avant l'écriture du moindre octet.

    La ligne MediaItem est créée tout de suite (nom réservé), les octets ne
    sont écrits qu'au commit : une sauvegarde annulée dans l'admin ne laisse
    aucun fichier orphelin dans le dossier protégé.
    """
    service = service or ProtectionService.from_settings()
    field = MediaItem._meta.get_field("file")
    storage = field.storage
    proposed = UploadDir(basedir=str(storage.location), baseurl=storage.base_url)

    item = MediaItem(title=os.path.splitext(os.path.basename(uploaded.name))[0])
    item.upload_dir = service.upload_directory(proposed)
    name = field.generate_filename(item, os.path.basename(uploaded.name))
    item.file.name = storage.get_available_name(name, max_length=field.max_length)
    item.save()

    def write_file():
        saved = storage.save(item.file.name, uploaded, max_length=field.max_length)
        if saved != item.file.name:
            # Nom pris entre-temps par un autre upload
            MediaItem.objects.filter(pk=item.pk).update(file=saved)
            item.file.name = saved
        logger.info(f"Fichier {saved} enregistré dans le dossier protégé")

    transaction.on_commit(write_file)
    return item


class PageFileForm(forms.ModelForm):
    upload = forms.FileField(
        label="Téléverser un fichier",
        required=False,
        validators=[validate_upload_extension],
        help_text="Remplace le fichier choisi ; enregistré dans le dossier protégé.",
    )

    class Meta:
        model = PageFile
        fields = ("title", "desc", "image", "file", "upload", "order")
        widgets = {
            "desc": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        self.service = kwargs.pop("service", None)
        super().__init__(*args, **kwargs)
        # Le fichier peut venir de l'upload : l'obligation est vérifiée dans clean()
        self.fields["file"].required = False

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("upload"):
            # Le nouvel upload prime sur le média sélectionné
            cleaned["file"] = None
        elif not cleaned.get("file") and "file" not in self.errors:
            self.add_error("file", "Choisissez un fichier existant ou téléversez-en un nouveau.")
        return cleaned

    def save(self, commit=True):
        upload = self.cleaned_data.get("upload")
        if upload:
            self.instance.file = store_protected_upload(upload, self.service)
        return super().save(commit=commit)
