"""
Business services for proxy service
"""

from .code_table import load_code_table

__all__ = ["load_code_table"]
