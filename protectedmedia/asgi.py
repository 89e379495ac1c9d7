import os
from django.core.asgi import get_asgi_application

# Définir le module de paramètres Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'protectedmedia.settings')

application = get_asgi_application()
