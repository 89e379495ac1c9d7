from rest_framework import serializers

from .models import PageFile
from .templatetags.file_extras import sanitize_desc


class PageFileSerializer(serializers.ModelSerializer):
    """Sérialiseur d'une ligne de la liste de fichiers d'une page."""
    title = serializers.SerializerMethodField()
    desc = serializers.SerializerMethodField()
    thumbnail = serializers.SerializerMethodField()
    file = serializers.SerializerMethodField()

    class Meta:
        model = PageFile
        fields = ['id', 'title', 'desc', 'thumbnail', 'file']
        read_only_fields = fields

    def _absolute(self, url):
        request = self.context.get('request')
        if url and request:
            return request.build_absolute_uri(url)
        return url or None

    def get_title(self, obj):
        return obj.display_title

    def get_desc(self, obj):
        return str(sanitize_desc(obj.desc))

    def get_thumbnail(self, obj):
        return self._absolute(obj.image.url) if obj.image_id else None

    def get_file(self, obj):
        return self._absolute(obj.file.url)
