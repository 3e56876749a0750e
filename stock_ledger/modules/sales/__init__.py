"""
Sales module package exports.
"""

from .controller import SalesController

__all__ = ["SalesController"]
