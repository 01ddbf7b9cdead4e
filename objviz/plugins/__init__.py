"""
Plugin contracts — abstract base class for emitter plugins.
"""
from .base import EmitterPlugin

__all__ = ['EmitterPlugin']
