"""
Query Parameter Models
Typed, allow-listed parameters for the HIRA lookups
"""

from typing import Dict, Mapping, Optional, Tuple, Type, TypeVar
from pydantic import BaseModel, ConfigDict

P = TypeVar("P", bound="AllowListedParams")


def first_non_empty(raw: Mapping[str, str], name: str) -> Optional[str]:
    """First non-empty value of a parameter, looking at every repeat when the mapping keeps them"""
    values = raw.getlist(name) if hasattr(raw, "getlist") else [raw.get(name)]
    return next((value for value in values if value), None)


def filter_allowed(raw: Mapping[str, str], allowed: Tuple[str, ...]) -> Dict[str, str]:
    """
    Keep only allow-listed, non-empty parameters.

    Names outside the allow-list are dropped silently; output order follows
    the allow-list. A repeated name (?clCd=01&clCd=) forwards its first
    non-empty value.
    """
    filtered = {}
    for name in allowed:
        value = first_non_empty(raw, name)
        if value:
            filtered[name] = value
    return filtered


class AllowListedParams(BaseModel):
    """Base for parameter sets forwarded verbatim to an upstream"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def allowed_names(cls) -> Tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def from_query(cls: Type[P], raw: Mapping[str, str]) -> P:
        return cls(**filter_allowed(raw, cls.allowed_names()))

    def to_upstream(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


class HospitalListParams(AllowListedParams):
    """Non-payment item hospital list (getNonPaymentItemHospList2)"""

    pageNo: Optional[str] = None
    numOfRows: Optional[str] = None
    itemCd: Optional[str] = None
    clCd: Optional[str] = None
    sidoCd: Optional[str] = None
    sgguCd: Optional[str] = None
    yadmNm: Optional[str] = None
    searchWrd: Optional[str] = None


class HospitalDetailParams(AllowListedParams):
    """Non-payment item hospital detail (getNonPaymentItemHospDtlList)"""

    pageNo: Optional[str] = None
    numOfRows: Optional[str] = None
    ykiho: Optional[str] = None
    clCd: Optional[str] = None
    sidoCd: Optional[str] = None
    sgguCd: Optional[str] = None
    yadmNm: Optional[str] = None
