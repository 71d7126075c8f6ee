# lexer/__init__.py

from .tokens import PlainRun, LiteralDelimiter, BracketedRun, Segment
from .validator import check_balance, validate
from .scanner import Scanner, tokenize

__all__ = [
    'PlainRun', 'LiteralDelimiter', 'BracketedRun', 'Segment',
    'check_balance', 'validate', 'Scanner', 'tokenize'
]
