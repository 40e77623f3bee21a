import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "portal-dev-secret-key-change-me")
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

# "production" moves the vault to ephemeral storage
PORTAL_ENV = os.getenv("PORTAL_ENV", "development")

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'accounts',
    'sharing',
    'files',
    'notifications',
    'messaging',
    'vault',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'portal_backend.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'portal_backend.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv("PORTAL_DATABASE_PATH", str(BASE_DIR / "data" / "database.db")),
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'portal-ratelimit',
    }
}

AUTH_USER_MODEL = 'accounts.CustomUser'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'accounts.authentication.SessionCookieAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'portal_backend.exceptions.portal_exception_handler',
    'UNAUTHENTICATED_USER': 'django.contrib.auth.models.AnonymousUser',
}

# Session cookie issued by /api/auth/login/
PORTAL_SESSION_COOKIE = "session"
PORTAL_SESSION_TTL_DAYS = int(os.getenv("SESSION_TTL_DAYS", "7"))
PORTAL_SESSION_COOKIE_SECURE = env_bool("SESSION_COOKIE_SECURE", PORTAL_ENV == "production")

# base64url encoded, must decode to 32 bytes
JWE_SECRET_KEY = os.getenv("JWE_SECRET_KEY", "cG9ydGFsLWRldi1qd2Uta2V5LWNoYW5nZS1tZS0zMmI=")

UPLOADS_DIR = Path(os.getenv("PORTAL_UPLOADS_DIR", str(BASE_DIR / "uploads")))
if PORTAL_ENV == "production":
    VAULT_UPLOADS_DIR = Path(os.getenv("PORTAL_VAULT_UPLOADS_DIR", "/tmp/vault-uploads"))
else:
    VAULT_UPLOADS_DIR = Path(os.getenv("PORTAL_VAULT_UPLOADS_DIR", str(BASE_DIR / "vault-uploads")))

DATA_UPLOAD_MAX_MEMORY_SIZE = 100 * 1024 * 1024

VAULT_PASSWORDS = {
    "collector": os.getenv("VAULT_PASSWORD_COLLECTOR", "vault123"),
    "developer": os.getenv("VAULT_PASSWORD_DEVELOPER", "devvault456"),
    "admin": os.getenv("VAULT_PASSWORD_ADMIN", "adminvault789"),
}

# Default accounts created by `manage.py seed_portal`
SEED_PASSWORDS = {
    "developer": os.getenv("SEED_PASSWORD_DEVELOPER", "admin123"),
    "collector": os.getenv("SEED_PASSWORD_COLLECTOR", "boss123"),
    "user1": os.getenv("SEED_PASSWORD_USER1", "user123"),
    "user2": os.getenv("SEED_PASSWORD_USER2", "user2123"),
}

LOGIN_RATE_LIMIT = os.getenv("LOGIN_RATE_LIMIT", "10/m")

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'portal': {
            'format': '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            'datefmt': '%H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'portal',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.getenv("PORTAL_LOG_LEVEL", "INFO"),
    },
}
