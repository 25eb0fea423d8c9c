"""
Data models for proxy service
"""

from .params import (
    AllowListedParams,
    HospitalDetailParams,
    HospitalListParams,
    filter_allowed,
)

__all__ = [
    "AllowListedParams",
    "HospitalDetailParams",
    "HospitalListParams",
    "filter_allowed",
]
