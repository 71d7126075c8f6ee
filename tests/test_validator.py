# test_validator.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from colorphrase.errors import MalformedPattern
from colorphrase.lexer.validator import check_balance, validate


class TestDistinctDelimiters:
    """Stack-based balance check for two different delimiter characters."""

    @pytest.mark.parametrize("pattern", ["", "plain", "{a}", "a{b}c{d}", "{{a}}", "{}"])
    def test_balanced(self, pattern):
        assert check_balance(pattern, "{", "}")

    @pytest.mark.parametrize("pattern", ["a{b", "a}b", "}{", "{{abc}", "{a}}", "x{"])
    def test_unbalanced(self, pattern):
        assert not check_balance(pattern, "{", "}")

    def test_custom_pair(self):
        assert check_balance("I'm<Chinese>,I love <China>", "<", ">")
        assert not check_balance("I'm<Chinese", "<", ">")

    def test_validate_raises(self):
        with pytest.raises(MalformedPattern):
            validate("a{b", "{", "}")

    def test_validate_passes(self):
        assert validate("a{b}", "{", "}") is None


class TestSameDelimiters:
    """Greedy escape pairing when left and right are the same character."""

    @pytest.mark.parametrize("pattern", ["", "a|b|c", "||", "|||x|", "||||", "|a||b|"])
    def test_balanced(self, pattern):
        assert check_balance(pattern, "|", "|")

    @pytest.mark.parametrize("pattern", ["|", "a|b", "|a||", "|||"])
    def test_unbalanced(self, pattern):
        assert not check_balance(pattern, "|", "|")
