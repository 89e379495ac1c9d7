import os

from django.conf import settings
from django.db import models
from django.utils.text import slugify

from protection.directory import ProtectedDirectory
from protection.uploads import media_upload_to
from protection.validators import validate_protected_url


class Page(models.Model):
    KIND_CHOICES = [
        ('page', 'Page'),
        ('post', 'Article'),
        ('course', 'Cours'),
    ]
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=220, unique=True, blank=True)
    kind = models.CharField(max_length=20, choices=KIND_CHOICES, default='page')
    body = models.TextField(blank=True)
    published = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['title']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)
        super().save(*args, **kwargs)

    @property
    def accepts_files(self):
        """Le type de page reçoit-il une liste de fichiers protégés ?"""
        kinds = getattr(settings, "PROTECTED_MEDIA_PAGE_KINDS", None)
        return not kinds or self.kind in kinds


class MediaItem(models.Model):
    """
    Élément de la médiathèque. Son identifiant sert de référence de fichier
    pour les listes des pages ; l'URL publique est résolue par le stockage.
    """
    title = models.CharField(max_length=200, blank=True)
    file = models.FileField(upload_to=media_upload_to, max_length=255)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-uploaded_at']
        verbose_name = "Média"
        verbose_name_plural = "Médias"

    def __str__(self):
        return self.title or self.filename

    @property
    def filename(self):
        if not self.file:
            return ""
        return os.path.basename(self.file.name)

    @property
    def url(self):
        if not self.file:
            return ""
        return self.file.url

    @property
    def is_protected(self):
        return ProtectedDirectory.from_settings().contains_url(self.url)


def validate_protected_media(value):
    """
    Valide qu'un média choisi pour une liste de fichiers est bien servi depuis
    le dossier protégé. `value` est la clé primaire (ou l'instance) du média.
    """
    item = value if isinstance(value, MediaItem) else MediaItem.objects.filter(pk=value).first()
    if item is None:
        # Référence inexistante : déjà signalée par la validation de la clé étrangère
        return
    validate_protected_url(item.url)


class PageFile(models.Model):
    """
    Une ligne de la liste de fichiers d'une page : titre, description,
    vignette et fichier (obligatoirement dans le dossier protégé).
    """
    page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='files')
    title = models.CharField(max_length=200, blank=True)
    desc = models.TextField("Description", blank=True)
    image = models.ForeignKey(
        MediaItem,
        verbose_name="Image",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='thumbnail_for',
    )
    file = models.ForeignKey(
        MediaItem,
        verbose_name="Fichier",
        on_delete=models.PROTECT,
        related_name='page_entries',
        validators=[validate_protected_media],
    )
    order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['order', 'pk']
        verbose_name = "Fichier"
        verbose_name_plural = "Fichiers"

    def __str__(self):
        return self.display_title

    @property
    def display_title(self):
        # Sans titre : le nom du fichier
        if self.title:
            return self.title
        return self.file.filename if self.file_id else ""
