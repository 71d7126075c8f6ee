# layout/__init__.py

from .buffer import SpannedBuffer
from .renderer import layout, render

__all__ = ['SpannedBuffer', 'layout', 'render']
