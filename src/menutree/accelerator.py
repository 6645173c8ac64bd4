"""Key binding descriptors attached to menu items."""
from enum import Enum


class AcceleratorError(ValueError):
    """Raised when an accelerator string cannot be parsed."""


class Modifier(Enum):
    CMD_OR_CTRL = "CmdOrCtrl"
    OPTION_OR_ALT = "OptionOrAlt"
    SHIFT = "Shift"
    SUPER = "Super"
    CONTROL = "Control"


# Lower-cased aliases accepted by Accelerator.parse
_MODIFIER_ALIASES = {
    'cmdorctrl': Modifier.CMD_OR_CTRL,
    'cmd': Modifier.CMD_OR_CTRL,
    'command': Modifier.CMD_OR_CTRL,
    'optionoralt': Modifier.OPTION_OR_ALT,
    'option': Modifier.OPTION_OR_ALT,
    'alt': Modifier.OPTION_OR_ALT,
    'shift': Modifier.SHIFT,
    'super': Modifier.SUPER,
    'control': Modifier.CONTROL,
    'ctrl': Modifier.CONTROL,
}


class Accelerator:
    """A key plus an ordered set of modifiers, e.g. ``CmdOrCtrl+Shift+s``."""

    def __init__(self, key, modifiers=None):
        self.key = key
        self.modifiers = []
        for modifier in modifiers or []:
            if modifier not in self.modifiers:
                self.modifiers.append(modifier)

    @classmethod
    def parse(cls, text):
        """Build an accelerator from its ``Mod+Mod+key`` string form.

        Args:
            text: Accelerator string, modifiers are case-insensitive

        Returns:
            Accelerator instance

        Raises:
            AcceleratorError: if the key is missing or a modifier is unknown
        """
        if not isinstance(text, str) or not text.strip():
            raise AcceleratorError(f"Invalid accelerator: {text!r}")

        # A trailing '+' means the key itself is the plus sign
        if text.endswith('++') or text == '+':
            parts = text[:-1].split('+')[:-1] + ['+']
        else:
            parts = text.split('+')

        key = parts[-1].strip()
        if not key:
            raise AcceleratorError(f"Missing key in accelerator: {text!r}")

        modifiers = []
        for name in parts[:-1]:
            modifier = _MODIFIER_ALIASES.get(name.strip().lower())
            if modifier is None:
                raise AcceleratorError(f"Unknown modifier {name!r} in {text!r}")
            modifiers.append(modifier)
        return cls(key.lower() if len(key) == 1 else key, modifiers)

    def __str__(self):
        return '+'.join([m.value for m in self.modifiers] + [self.key])

    def __repr__(self):
        return f"Accelerator({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, Accelerator):
            return NotImplemented
        return self.key == other.key and set(self.modifiers) == set(other.modifiers)

    def __hash__(self):
        return hash((self.key, frozenset(self.modifiers)))


def key(key):
    """Accelerator with no modifiers."""
    return Accelerator(key)


def cmd_or_ctrl(key):
    return Accelerator(key, [Modifier.CMD_OR_CTRL])


def option_or_alt(key):
    return Accelerator(key, [Modifier.OPTION_OR_ALT])


def shift(key):
    return Accelerator(key, [Modifier.SHIFT])


def super_key(key):
    return Accelerator(key, [Modifier.SUPER])


def control(key):
    return Accelerator(key, [Modifier.CONTROL])
