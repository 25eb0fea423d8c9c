"""
Proxy Service
NAVER map geocoding and HIRA non-payment item lookups behind one gateway
"""

__version__ = "1.0.0"
