"""
Allegro WebAPI Client Package
"""
from .client import AllegroClient
from .auth import APIError, AuthError, NotConnectedError, hash_password
from .models import (
    ALLOWED_DURATIONS,
    NotSoldItem,
    NothingToRepublish,
    RelistRequest,
    Republished,
    SellOption,
    Session,
)
from .config import Config, ConfigurationError, get_config

__all__ = [
    'AllegroClient',
    'APIError',
    'AuthError',
    'NotConnectedError',
    'hash_password',
    'ALLOWED_DURATIONS',
    'NotSoldItem',
    'NothingToRepublish',
    'RelistRequest',
    'Republished',
    'SellOption',
    'Session',
    'Config',
    'ConfigurationError',
    'get_config',
]
