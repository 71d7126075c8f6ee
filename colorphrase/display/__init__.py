# display/__init__.py

from .console import PhraseConsole, to_rich_text
from .terminal import PatternValidator, PhraseTerminal

__all__ = ['PhraseConsole', 'PatternValidator', 'PhraseTerminal', 'to_rich_text']
