"""
Configuration settings for the Allegro WebAPI client
"""
import os
import logging
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

SANDBOX_URL = 'https://webapi.allegro.pl.webapisandbox.pl/service.php?wsdl'
PRODUCTION_URL = 'https://webapi.allegro.pl/service.php?wsdl'

DEFAULT_COUNTRY_ID = 1
DEFAULT_SOAP_TIMEOUT = 30

_TRUTHY = ('1', 'true', 'yes', 'on')


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete"""
    pass


def wsdl_url(sandbox: bool) -> str:
    """Pick the WSDL endpoint for sandbox or production"""
    return SANDBOX_URL if sandbox else PRODUCTION_URL


class Config:
    """Allegro WebAPI Configuration"""

    def __init__(self):
        # Credentials (optional until a script needs them)
        self.allegro_login = os.getenv('ALLEGRO_LOGIN', '')
        self.allegro_password = os.getenv('ALLEGRO_PASSWORD', '')
        self.allegro_api_key = os.getenv('ALLEGRO_API_KEY', '')

        self._raw_country_id = os.getenv('ALLEGRO_COUNTRY_ID', str(DEFAULT_COUNTRY_ID))
        self._raw_timeout = os.getenv('ALLEGRO_SOAP_TIMEOUT', str(DEFAULT_SOAP_TIMEOUT))

        self.sandbox = os.getenv('ALLEGRO_SANDBOX', '').strip().lower() in _TRUTHY

    @property
    def country_id(self) -> int:
        try:
            return int(self._raw_country_id)
        except ValueError:
            logger.warning(f"Invalid ALLEGRO_COUNTRY_ID {self._raw_country_id!r}, using {DEFAULT_COUNTRY_ID}")
            return DEFAULT_COUNTRY_ID

    @property
    def soap_timeout(self) -> float:
        try:
            return float(self._raw_timeout)
        except ValueError:
            logger.warning(f"Invalid ALLEGRO_SOAP_TIMEOUT {self._raw_timeout!r}, using {DEFAULT_SOAP_TIMEOUT}")
            return float(DEFAULT_SOAP_TIMEOUT)

    @property
    def wsdl_url(self) -> str:
        return wsdl_url(self.sandbox)

    def validate(self):
        """Validate required configuration"""
        if not self.allegro_login:
            raise ConfigurationError("ALLEGRO_LOGIN not set")
        if not self.allegro_password:
            raise ConfigurationError("ALLEGRO_PASSWORD not set")
        if not self.allegro_api_key:
            raise ConfigurationError("ALLEGRO_API_KEY not set")
        try:
            int(self._raw_country_id)
        except ValueError:
            raise ConfigurationError(f"ALLEGRO_COUNTRY_ID must be an integer, got {self._raw_country_id!r}")
        try:
            float(self._raw_timeout)
        except ValueError:
            raise ConfigurationError(f"ALLEGRO_SOAP_TIMEOUT must be a number, got {self._raw_timeout!r}")


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance"""
    global _config
    if _config is None:
        _config = Config()
    return _config
