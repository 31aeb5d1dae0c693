"""
appstore-lookup

Checks the App Store (iTunes lookup endpoint) for a newer version of an
application and classifies the update as required, optional or unavailable.

Usage:
    from appstore_lookup import AppStoreLookup, LookupConfig

    client = AppStoreLookup(LookupConfig('com.example.app', '1.4.0'))
    result = client.lookup_latest().result(timeout=30)
    print(result.update_type)
"""

from .__version__ import __version__
from .client import AppStoreLookup, lookup_latest
from .config import config_from_env
from .exceptions import (
    InvalidRequestConfiguration,
    InvalidResponseData,
    NetworkFailure,
    StoreLookupError,
)
from .models import (
    LookupConfig,
    LookupFailure,
    LookupOutcome,
    LookupResult,
    LookupSuccess,
    UpdateType,
)
from .version_compare import classify, is_newer_version, parse_version

__all__ = [
    'AppStoreLookup',
    'lookup_latest',
    'config_from_env',
    'LookupConfig',
    'LookupResult',
    'LookupSuccess',
    'LookupFailure',
    'LookupOutcome',
    'UpdateType',
    'StoreLookupError',
    'NetworkFailure',
    'InvalidResponseData',
    'InvalidRequestConfiguration',
    'classify',
    'is_newer_version',
    'parse_version',
    '__version__',
]
