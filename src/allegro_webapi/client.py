"""
Allegro WebAPI client over SOAP
"""
import logging
from typing import Any, Dict, List, Optional, Union

from .auth import NotConnectedError, build_credentials, gather_version_keys, login
from .config import Config, get_config
from .models import (
    ALLOWED_DURATIONS,
    NOTHING_TO_REPUBLISH_MESSAGE,
    NotSoldItem,
    NothingToRepublish,
    RelistRequest,
    Republished,
    RepublishResult,
    SellOption,
    Session,
    VersionKey,
    unwrap_items,
)
from .transport import create_transport

logger = logging.getLogger(__name__)


class AllegroClient:
    def __init__(self, sandbox: Optional[bool] = None, transport=None, config: Optional[Config] = None):
        self.config = config or get_config()
        self.sandbox = self.config.sandbox if sandbox is None else sandbox
        self.transport = transport or create_transport(self.sandbox, timeout=self.config.soap_timeout)
        self.country_id = self.config.country_id
        self.version_keys: Dict[int, VersionKey] = {}
        self.session: Optional[Session] = None

    def connect(self, user_login: str, user_password: str, api_key: str) -> Session:
        """Log in and keep the session for later calls.

        Calling it again logs in anew and replaces the previous session.
        """
        credentials = build_credentials(user_login, user_password, api_key)
        country_id = self.country_id

        logger.info(f"Connecting to Allegro WebAPI as {user_login} (country {country_id}, sandbox={self.sandbox})")
        self.version_keys = gather_version_keys(self.transport, country_id, credentials.api_key)
        self.session = login(self.transport, credentials, country_id, self.version_keys)
        logger.info(f"Logged in as {user_login}")
        return self.session

    def connect_from_config(self) -> Session:
        self.config.validate()
        return self.connect(
            self.config.allegro_login,
            self.config.allegro_password,
            self.config.allegro_api_key,
        )

    def set_country_id(self, country_id: int):
        """Set the country used by the next connect(); an open session keeps its own"""
        self.country_id = int(country_id)

    def best_allowed_duration(self, duration) -> int:
        """
        Return ``duration`` if Allegro accepts it, otherwise 3.

        best_allowed_duration(5)   -> 5
        best_allowed_duration(14)  -> 14
        best_allowed_duration(9)   -> 3
        best_allowed_duration(999) -> 3
        """
        try:
            duration = int(duration)
        except (TypeError, ValueError):
            return ALLOWED_DURATIONS[0]
        if duration in ALLOWED_DURATIONS:
            return duration
        return ALLOWED_DURATIONS[0]

    def _require_session(self) -> Session:
        if self.session is None:
            raise NotConnectedError("Not connected, call connect() first")
        return self.session

    def do_get_my_not_sold_items(self) -> Dict[str, Any]:
        session = self._require_session()
        return self.transport.invoke('doGetMyNotSoldItems', {
            'sessionId': session.handle,
        })

    def not_sold_items(self) -> List[NotSoldItem]:
        response = self.do_get_my_not_sold_items()
        return [NotSoldItem.from_response(item) for item in unwrap_items((response or {}).get('notSoldItemsList'))]

    def do_sell_some_again(self, request: Union[RelistRequest, Dict[str, Any]]) -> Dict[str, Any]:
        """Relist one item. ``request`` may also be a dict with the keys
        itemId, duration, sellStartingTime and sellOption."""
        session = self._require_session()
        if not isinstance(request, RelistRequest):
            request = RelistRequest.from_options(request)

        return self.transport.invoke('doSellSomeAgain', {
            'sessionHandle': session.handle,
            'sellItemsArray': {'item': request.item_id},
            'sellAuctionDuration': self.best_allowed_duration(request.duration),
            'sellStartingTime': request.sell_starting_time,
            'sellOptions': int(request.sell_option),
        })

    def republish_not_sold_items(self) -> RepublishResult:
        """Relist every unsold item with its previous duration, starting now"""
        items = self.not_sold_items()
        if not items:
            logger.info(NOTHING_TO_REPUBLISH_MESSAGE)
            return NothingToRepublish()

        responses = []
        for item in items:
            logger.info(f"Relisting item {item.item_id} for {item.duration_days} days")
            responses.append(self.do_sell_some_again(RelistRequest(
                item_id=item.item_id,
                duration=item.duration_days,
                sell_starting_time=0,
                sell_option=SellOption.OPTION_1,
            )))
        return Republished(responses)
