"""
SOAP transport for the Allegro WebAPI

All envelope handling is done by zeep. This module only exposes the generic
``invoke(method_name, params)`` call the client is written against.
"""
import logging
from typing import Any, Dict, Optional

import requests
from zeep import Client, Settings
from zeep.helpers import serialize_object
from zeep.transports import Transport

from .config import DEFAULT_SOAP_TIMEOUT, wsdl_url

logger = logging.getLogger(__name__)


class SoapTransport:
    """Calls WebAPI operations on a WSDL endpoint"""

    def __init__(self, wsdl_url: str, timeout: float = DEFAULT_SOAP_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.wsdl_url = wsdl_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        # WSDL is fetched on first use
        if self._client is None:
            logger.debug(f"Loading WSDL from {self.wsdl_url}")
            transport = Transport(
                session=self.session,
                timeout=self.timeout,
                operation_timeout=self.timeout,
            )
            self._client = Client(
                self.wsdl_url,
                transport=transport,
                settings=Settings(strict=False),
            )
        return self._client

    def invoke(self, method_name: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Call ``method_name`` with ``params`` and return the response as dicts.

        Faults and network errors are raised as zeep/requests raise them.
        """
        logger.debug(f"SOAP call {method_name}")
        operation = getattr(self.client.service, method_name)
        result = operation(**params)
        if result is None:
            return {}
        return serialize_object(result, dict)


def create_transport(sandbox: bool = False, timeout: float = DEFAULT_SOAP_TIMEOUT) -> SoapTransport:
    return SoapTransport(wsdl_url(sandbox), timeout=timeout)
