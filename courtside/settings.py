"""
Django settings for the courtside project.

Values that differ between deployments are read from the environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('COURTSIDE_SECRET_KEY', 'courtside-development-key')

DEBUG = os.environ.get('COURTSIDE_DEBUG', 'true').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = os.environ.get('COURTSIDE_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'courtside.result_core',
    'courtside.results',
]

MIDDLEWARE = []

# Results live in the external result store; nothing is kept locally
DATABASES = {}

USE_I18N = True
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

COURTSIDE_RESULT_ENTRY = {
    # Offer "2-0 ret" style codes in the result form
    'ALLOW_RETIREMENTS': os.environ.get('COURTSIDE_ALLOW_RETIREMENTS', 'true').lower()
    in ('1', 'true', 'yes'),
}

LOG_LEVEL = os.environ.get('COURTSIDE_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'courtside': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
