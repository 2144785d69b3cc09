"""
Test settings - disables debug mode and quiets result logging for tests
"""
from .settings import *

# Disable debug mode for tests
DEBUG = False

LOGGING['loggers']['courtside']['level'] = 'WARNING'

COURTSIDE_RESULT_ENTRY = dict(COURTSIDE_RESULT_ENTRY, ALLOW_RETIREMENTS=True)
