"""Django settings.

Local development defaults are intentionally simple.

Notes for Render deploy:
- Provide a strong SECRET_KEY and set DEBUG=False
- Set SITE_URL to the public origin (used for absolute links)
- Run `python manage.py check_advertisements` before `collectstatic` so a
  misconfigured advertisement fails the build instead of a page render
"""

from pathlib import Path

import environ

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


env = environ.Env(
    DEBUG=(bool, True),
)

# Read .env if present (local dev). In production, use real environment variables.
environ.Env.read_env(BASE_DIR / ".env")

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-local-dev-only")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])

# Render sets this to your public hostname (e.g. frontendhire.onrender.com)
RENDER_EXTERNAL_HOSTNAME = env("RENDER_EXTERNAL_HOSTNAME", default="")
if RENDER_EXTERNAL_HOSTNAME and RENDER_EXTERNAL_HOSTNAME not in ALLOWED_HOSTS:
    ALLOWED_HOSTS.append(RENDER_EXTERNAL_HOSTNAME)

CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[])
if RENDER_EXTERNAL_HOSTNAME:
    render_origin = f"https://{RENDER_EXTERNAL_HOSTNAME}"
    if render_origin not in CSRF_TRUSTED_ORIGINS:
        CSRF_TRUSTED_ORIGINS.append(render_origin)

SITE_NAME = "Frontend Hire"
SITE_URL = env("SITE_URL", default="http://localhost:8000")


# Application definition

INSTALLED_APPS = [
    'django.contrib.staticfiles',

    # Local apps
    'advertise',
    'pages',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# Behind Render / proxies, respect forwarded https.
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

ROOT_URLCONF = 'frontendhire.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        # Learn pages live in content/learn/<slug path>.html
        'DIRS': [BASE_DIR / 'templates', BASE_DIR / 'content'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'pages.context_processors.site',
                'advertise.context_processors.advertisements',
            ],
        },
    },
]

WSGI_APPLICATION = 'frontendhire.wsgi.application'


# No persistence: every page is built from static content and configuration.
DATABASES = {}


# Internationalization
# https://docs.djangoproject.com/en/5.2/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True


# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/5.2/howto/static-files/

STATIC_URL = '/static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        # The manifest only exists after collectstatic, so keep plain storage for local dev.
        "BACKEND": (
            "django.contrib.staticfiles.storage.StaticFilesStorage"
            if DEBUG
            else "whitenoise.storage.CompressedManifestStaticFilesStorage"
        ),
    },
}


# Advertisements
# Module holding ADVERTISEMENTS and ADVERTISEMENT_CONSTRAINTS. Loaded once at startup.
ADVERTISEMENT_CATALOG = env("ADVERTISEMENT_CATALOG", default="advertise.catalog")
ADVERTISE_CONTACT_URL = env(
    "ADVERTISE_CONTACT_URL",
    default="https://cal.com/iamyhr/advertisements-on-frontend-hire",
)

# Analytics are computed by Plausible; we only embed their script and public dashboard.
PLAUSIBLE_DOMAIN = env("PLAUSIBLE_DOMAIN", default="")
PLAUSIBLE_SHARE_URL = env("PLAUSIBLE_SHARE_URL", default="")


# Logging

LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "advertise": {"level": LOG_LEVEL},
        "pages": {"level": LOG_LEVEL},
    },
}
