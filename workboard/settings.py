# workboard/settings.py
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('WORKBOARD_SECRET_KEY', 'django-insecure-workboard-dev-key')
DEBUG = env_bool('WORKBOARD_DEBUG', True)
ALLOWED_HOSTS = [h for h in os.environ.get('WORKBOARD_ALLOWED_HOSTS', '*').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django_filters',

    # Nasze aplikacje
    'apps.core',
    'apps.projects',
    'apps.tasks',
    'apps.meetings',
    'apps.reminders',
    'apps.goals',
    'apps.reports',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'workboard.urls'
WSGI_APPLICATION = 'workboard.wsgi.application'

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

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('WORKBOARD_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
        # Timeout I/O na granicy bazy (sekundy)
        'OPTIONS': {'timeout': int(os.environ.get('WORKBOARD_DB_TIMEOUT', '20'))},
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
# "Dziś" i granice dni liczone są w tej strefie
TIME_ZONE = os.environ.get('WORKBOARD_TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

WORKBOARD = {
    'PAGE_SIZE': 10,
    'DASHBOARD_WINDOW_DAYS': 30,
    'DASHBOARD_PROJECTS_LIMIT': 6,
    'PRODUCTIVITY_WINDOW_DAYS': 7,
    'UPCOMING_DAYS': 7,
    'UPCOMING_MEETINGS_LIMIT': 10,
}

LOG_LEVEL = os.environ.get('WORKBOARD_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
    },
}
