import bleach
from django import template
from django.utils.safestring import mark_safe

register = template.Library()

ALLOWED_TAGS = set(bleach.sanitizer.ALLOWED_TAGS) | {'p', 'br', 'span'}


@register.filter
def sanitize_desc(value):
    # Description saisie dans l'admin : HTML simple seulement
    if not value:
        return ""
    return mark_safe(bleach.clean(value, tags=ALLOWED_TAGS, attributes=bleach.sanitizer.ALLOWED_ATTRIBUTES, strip=True))
