"""
Data models for Allegro WebAPI sessions and listings
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

SECONDS_PER_DAY = 86400

# Auction durations (days) accepted by doSellSomeAgain
ALLOWED_DURATIONS = (3, 5, 7, 10, 14)

NOTHING_TO_REPUBLISH_MESSAGE = 'List of not sold items is empty right now. Skipping.'


class SellOption(IntEnum):
    """sellOptions codes for doSellSomeAgain, interpreted by Allegro"""
    OPTION_1 = 1
    OPTION_2 = 2
    OPTION_3 = 3


@dataclass(frozen=True)
class Credentials:
    """Login data sent with doLoginEnc"""
    login: str
    password_hash: str  # base64(sha256(password)), never the raw password
    api_key: str

    def __repr__(self) -> str:
        return f"Credentials(login={self.login!r}, password_hash='***', api_key='***')"


@dataclass(frozen=True)
class VersionKey:
    """One sysCountryStatus entry from doQueryAllSysStatus"""
    country_id: int
    ver_key: Any
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Session:
    """An authenticated WebAPI session"""
    handle: str  # sessionHandlePart
    country_id: int
    ver_key: Any
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass
class NotSoldItem:
    """Entry of notSoldItemsList"""
    item_id: Any
    start_time: int  # unix timestamp
    end_time: int  # unix timestamp
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'NotSoldItem':
        return cls(
            item_id=data.get('itemId'),
            start_time=int(data.get('itemStartTime') or 0),
            end_time=int(data.get('itemEndTime') or 0),
            raw=data,
        )

    @property
    def duration_days(self) -> int:
        """Whole days the auction ran for"""
        return abs(self.end_time - self.start_time) // SECONDS_PER_DAY


@dataclass
class RelistRequest:
    """Parameters for relisting one item"""
    item_id: Any
    duration: int  # days, mapped through best_allowed_duration before sending
    sell_starting_time: int = 0  # 0 starts immediately
    sell_option: int = SellOption.OPTION_1

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> 'RelistRequest':
        return cls(
            item_id=options['itemId'],
            duration=options['duration'],
            sell_starting_time=options.get('sellStartingTime', 0),
            sell_option=options.get('sellOption', SellOption.OPTION_1),
        )


@dataclass(frozen=True)
class Republished:
    """Relist responses, one per unsold item, in listing order"""
    responses: List[Dict[str, Any]]


@dataclass(frozen=True)
class NothingToRepublish:
    """There were no unsold items to relist"""
    message: str = NOTHING_TO_REPUBLISH_MESSAGE


RepublishResult = Union[Republished, NothingToRepublish]


def unwrap_items(value: Optional[Any]) -> List[Dict[str, Any]]:
    """
    Normalize a SOAP array into a list of records.

    Arrays come back either as a plain list, wrapped as {'item': [...]}, or
    as a single record when the array has one element.
    """
    if not value:
        return []
    if isinstance(value, dict) and 'item' in value:
        value = value['item']
        if not value:
            return []
    if isinstance(value, dict):
        return [value]
    return list(value)
