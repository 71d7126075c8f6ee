# lexer/validator.py

from typing import List

from ..errors import MalformedPattern


def _check_distinct(pattern: str, left: str, right: str) -> bool:
    pending: List[str] = []
    for char in pattern:
        if char == left:
            pending.append(char)
        elif char == right:
            if not pending:
                return False
            pending.pop()
    return not pending


def _check_same(pattern: str, delimiter: str) -> bool:
    # Greedy from the left: outside a bracket a doubled delimiter is an escape,
    # a single one opens; inside a bracket the next delimiter closes.
    index, inside = 0, False
    while index < len(pattern):
        if pattern[index] != delimiter:
            index += 1
        elif inside:
            inside = False
            index += 1
        elif pattern.startswith(delimiter * 2, index):
            index += 2
        else:
            inside = True
            index += 1
    return not inside


def check_balance(pattern: str, left: str, right: str) -> bool:
    """Return True when every delimiter in the pattern has a partner."""
    if left == right:
        return _check_same(pattern, left)
    return _check_distinct(pattern, left, right)


def validate(pattern: str, left: str, right: str) -> None:
    """Raise MalformedPattern unless the pattern's delimiters balance."""
    if not check_balance(pattern, left, right):
        raise MalformedPattern(f"The separators don't match in the pattern: {pattern!r}")
