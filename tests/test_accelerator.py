"""Tests for accelerator parsing and formatting."""
import pytest

from menutree.accelerator import (
    Accelerator, AcceleratorError, Modifier, cmd_or_ctrl, control, key,
    option_or_alt, shift, super_key,
)


class TestParse:
    """Test parsing accelerator strings."""

    def test_key_only(self):
        """Test a bare key."""
        acc = Accelerator.parse("F5")
        assert acc.key == "F5"
        assert acc.modifiers == []

    def test_modifiers_in_order(self):
        """Test modifiers keep their written order."""
        acc = Accelerator.parse("CmdOrCtrl+Shift+S")
        assert acc.key == "s"
        assert acc.modifiers == [Modifier.CMD_OR_CTRL, Modifier.SHIFT]

    def test_aliases(self):
        """Test common modifier aliases."""
        assert Accelerator.parse("ctrl+alt+x") == Accelerator("x", [Modifier.CONTROL, Modifier.OPTION_OR_ALT])

    def test_plus_key(self):
        """Test the plus sign as key."""
        acc = Accelerator.parse("CmdOrCtrl++")
        assert acc.key == "+"
        assert acc.modifiers == [Modifier.CMD_OR_CTRL]

    @pytest.mark.parametrize("value", ["", "   ", "Shift+", "Hyper+x", None, 5])
    def test_invalid(self, value):
        """Test malformed strings raise AcceleratorError."""
        with pytest.raises(AcceleratorError):
            Accelerator.parse(value)

    def test_error_is_value_error(self):
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError):
            Accelerator.parse("Meta+x")


class TestFormat:
    """Test string form and helpers."""

    def test_str_parses_back(self):
        """Test str() output is accepted by parse()."""
        acc = Accelerator("z", [Modifier.CMD_OR_CTRL, Modifier.SHIFT])
        assert str(acc) == "CmdOrCtrl+Shift+z"
        assert Accelerator.parse(str(acc)) == acc

    def test_duplicate_modifiers_collapse(self):
        """Test repeated modifiers are kept once."""
        acc = Accelerator("a", [Modifier.SHIFT, Modifier.SHIFT])
        assert acc.modifiers == [Modifier.SHIFT]

    def test_equality_ignores_modifier_order(self):
        """Test modifier order does not affect equality or hashing."""
        one = Accelerator("a", [Modifier.SHIFT, Modifier.CONTROL])
        two = Accelerator("a", [Modifier.CONTROL, Modifier.SHIFT])
        assert one == two
        assert hash(one) == hash(two)

    def test_helpers(self):
        """Test helper constructors pick the right modifier."""
        assert str(key("F1")) == "F1"
        assert cmd_or_ctrl("c").modifiers == [Modifier.CMD_OR_CTRL]
        assert option_or_alt("c").modifiers == [Modifier.OPTION_OR_ALT]
        assert shift("c").modifiers == [Modifier.SHIFT]
        assert super_key("c").modifiers == [Modifier.SUPER]
        assert control("c").modifiers == [Modifier.CONTROL]
