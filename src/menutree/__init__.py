"""menutree - An ordered tree of menu nodes for menu bars and context menus."""

from .accelerator import Accelerator, AcceleratorError, Modifier
from .builders import checkbox, radio, separator, submenu, submenu_with_id, text
from .loader import MenuConfigError, dump_menu, load_menu, parse_menu, save_menu
from .menu import ItemType, MenuNode, Role

__all__ = [
    'Accelerator', 'AcceleratorError', 'Modifier',
    'checkbox', 'radio', 'separator', 'submenu', 'submenu_with_id', 'text',
    'MenuConfigError', 'dump_menu', 'load_menu', 'parse_menu', 'save_menu',
    'ItemType', 'MenuNode', 'Role',
]
