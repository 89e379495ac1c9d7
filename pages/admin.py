from django.contrib import admin
from django.utils.html import format_html

from .forms_admin import PageFileForm
from .models import MediaItem, Page, PageFile


# --- Liste de fichiers protégés dans la fiche Page ---
class PageFileInline(admin.StackedInline):
    model = PageFile
    form = PageFileForm
    extra = 1
    verbose_name = "Fichier protégé"
    verbose_name_plural = "Fichiers protégés"
    autocomplete_fields = ("image", "file")


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("title", "kind", "published", "files_count", "updated_at")
    list_filter = ("kind", "published")
    search_fields = ("title", "body")
    prepopulated_fields = {"slug": ("title",)}
    inlines = (PageFileInline,)

    @admin.display(description="Fichiers")
    def files_count(self, obj):
        return obj.files.count()

    def get_inline_instances(self, request, obj=None):
        # Pas de liste de fichiers pour les types de page non concernés
        if obj is not None and not obj.accepts_files:
            return []
        return super().get_inline_instances(request, obj)


@admin.register(MediaItem)
class MediaItemAdmin(admin.ModelAdmin):
    list_display = ("__str__", "file_link", "protected", "uploaded_at")
    search_fields = ("title", "file")
    readonly_fields = ("uploaded_at",)

    @admin.display(description="Fichier")
    def file_link(self, obj):
        if obj.file and obj.file.name:
            return format_html("<a href='{}' target='_blank'>{}</a>", obj.url, obj.filename)
        return "—"

    @admin.display(description="Protégé", boolean=True)
    def protected(self, obj):
        return obj.is_protected
