"""
Product module package exports.
"""

from .controller import ProductController

__all__ = ["ProductController"]
