import os
from pathlib import Path
from dotenv import load_dotenv
from decouple import config, Csv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
DEBUG = os.getenv("DEBUG", "True") == "True"
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h.strip()] or ["*"]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Apps tierces
    'rest_framework',

    # Apps locales
    'protection.apps.ProtectionConfig',
    'pages.apps.PagesConfig',
    'core.apps.CoreConfig',
]

MIDDLEWARE = [
    # Middleware de sécurité (doivent être en premier)
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',

    # Middleware de base
    'django.middleware.common.CommonMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',

    # Middleware personnalisé (après l'authentification : a besoin de request.user)
    'core.middleware.ProtectionCheckMiddleware',
]

ROOT_URLCONF = 'protectedmedia.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'protectedmedia.wsgi.application'
ASGI_APPLICATION = 'protectedmedia.asgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'file': {
            'level': 'DEBUG',
            'class': 'logging.FileHandler',
            'filename': os.path.join(BASE_DIR, 'debug.log'),
            'formatter': 'verbose',
            'delay': True,
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
        'protection': {
            'handlers': ['console', 'file'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'pages': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}

LANGUAGE_CODE = 'fr-fr'
TIME_ZONE = 'Europe/Paris'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

MEDIA_URL = '/media/'
MEDIA_ROOT = Path(config("MEDIA_ROOT", default=str(BASE_DIR / 'media')))

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Origine canonique du site : seules les requêtes dont le Referer commence par
# cette URL peuvent lire le dossier protégé (règle Apache générée).
SITE_URL = config("SITE_URL", default="http://localhost:8000")

# --- Fichiers protégés ---
PROTECTED_MEDIA_DIRECTORY = config("PROTECTED_MEDIA_DIRECTORY", default="protected_uploads")
# Vide = tout refuser hors referer du site ; ["pdf"] = ne refuser que les *.pdf
PROTECTED_MEDIA_DENY_EXTENSIONS = config("PROTECTED_MEDIA_DENY_EXTENSIONS", default="", cast=Csv())
# Extensions acceptées à l'upload depuis la liste de fichiers d'une page
PROTECTED_MEDIA_FILE_EXTENSIONS = config("PROTECTED_MEDIA_FILE_EXTENSIONS", default="pdf", cast=Csv())
PROTECTED_MEDIA_CHECK_TTL = config("PROTECTED_MEDIA_CHECK_TTL", default=60 * 60 * 24, cast=int)  # 24 heures
PROTECTED_MEDIA_CACHE_ALIAS = 'default'
# Types de pages qui reçoivent une liste de fichiers
PROTECTED_MEDIA_PAGE_KINDS = config("PROTECTED_MEDIA_PAGE_KINDS", default="page,post", cast=Csv())

# Configuration du cache avec fallback en mémoire si Redis n'est pas disponible
REDIS_URL = config("REDIS_URL", default="")
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'protectedmedia-cache',
        'TIMEOUT': 60 * 60 * 24,  # 24 heures
    },
}
if REDIS_URL:
    try:
        import redis
        r = redis.Redis.from_url(REDIS_URL, socket_connect_timeout=1)
        r.ping()
        CACHES = {
            'default': {
                'BACKEND': 'django_redis.cache.RedisCache',
                'LOCATION': REDIS_URL,
                'OPTIONS': {
                    'CLIENT_CLASS': 'django_redis.client.DefaultClient',
                    'IGNORE_EXCEPTIONS': True,
                    'SOCKET_CONNECT_TIMEOUT': 5,  # Timeout de connexion de 5 secondes
                    'SOCKET_TIMEOUT': 5,  # Timeout de socket de 5 secondes
                },
                'KEY_PREFIX': 'protectedmedia',
                'TIMEOUT': 60 * 60 * 24,  # 24 heures
            },
        }
    except Exception as e:
        print(f"Warning: Redis n'est pas disponible, utilisation du cache en mémoire. Erreur: {e}")

DATA_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024  # 10MB
FILE_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024  # 10MB

LOGIN_URL = '/gestion/login/'

# Autoriser l'affichage en iframe sur la même origine (visionneuse des fichiers protégés)
X_FRAME_OPTIONS = 'SAMEORIGIN'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
}
