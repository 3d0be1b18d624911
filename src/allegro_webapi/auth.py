"""
Allegro WebAPI login

Logging in takes two round trips: doQueryAllSysStatus returns the version
key of every country, and doLoginEnc needs the key of the chosen country as
its ``localVersion``.

Usage:
    from allegro_webapi.auth import build_credentials, gather_version_keys, login

    credentials = build_credentials('user', 'password', 'api-key')
    keys = gather_version_keys(transport, 1, credentials.api_key)
    session = login(transport, credentials, 1, keys)
"""
import base64
import hashlib
import logging
from typing import Dict, Optional

from zeep.exceptions import Fault

from .models import Credentials, Session, VersionKey, unwrap_items

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base error raised by the Allegro client"""
    pass


class AuthError(APIError):
    """doLoginEnc rejected the login"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class NotConnectedError(APIError):
    """A session is required but connect() has not succeeded"""
    pass


def hash_password(raw_password: str) -> str:
    """Encode a password the way doLoginEnc expects: base64(sha256(password))"""
    digest = hashlib.sha256(raw_password.encode('utf-8')).digest()
    return base64.b64encode(digest).decode('ascii')


def build_credentials(login: str, raw_password: str, api_key: str) -> Credentials:
    return Credentials(
        login=login,
        password_hash=hash_password(raw_password),
        api_key=api_key,
    )


def gather_version_keys(transport, country_id: int, api_key: str) -> Dict[int, VersionKey]:
    """Query system status and index the version keys by country id"""
    status = transport.invoke('doQueryAllSysStatus', {
        'countryId': country_id,
        'webapiKey': api_key,
    })

    version_keys = {}
    for item in unwrap_items((status or {}).get('sysCountryStatus')):
        key = VersionKey(
            country_id=int(item['countryId']),
            ver_key=item.get('verKey'),
            raw=item,
        )
        version_keys[key.country_id] = key

    logger.debug(f"Gathered version keys for {len(version_keys)} countries")
    return version_keys


def login(transport, credentials: Credentials, country_id: int,
          version_keys: Dict[int, VersionKey]) -> Session:
    """Log in with doLoginEnc and return the new session"""
    version_key = version_keys.get(country_id)
    if version_key is None:
        raise AuthError(f"No version key returned for country {country_id}")

    try:
        response = transport.invoke('doLoginEnc', {
            'userLogin': credentials.login,
            'userHashPassword': credentials.password_hash,
            'webapiKey': credentials.api_key,
            'countryCode': country_id,
            'localVersion': version_key.ver_key,
        })
    except Fault as e:
        logger.error(f"Login rejected for {credentials.login}: {e.message}")
        raise AuthError(e.message, code=e.code) from e

    handle = (response or {}).get('sessionHandlePart')
    if not handle:
        raise AuthError("doLoginEnc returned no session handle")

    return Session(
        handle=handle,
        country_id=country_id,
        ver_key=version_key.ver_key,
        raw=response,
    )
