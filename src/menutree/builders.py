"""Helpers that create correctly initialised menu nodes."""
from .menu import ItemType, MenuNode


def text(label, id="", accelerator=None):
    """Plain clickable item."""
    return MenuNode(label=label, id=id, type=ItemType.TEXT, accelerator=accelerator)


def separator():
    return MenuNode(type=ItemType.SEPARATOR)


def radio(label, id="", selected=False, accelerator=None):
    return MenuNode(label=label, id=id, type=ItemType.RADIO,
                    checked=selected, accelerator=accelerator)


def checkbox(label, id="", checked=False, accelerator=None):
    return MenuNode(label=label, id=id, type=ItemType.CHECKBOX,
                    checked=checked, accelerator=accelerator)


def submenu(label, items=None):
    """Submenu owning ``items``; each item's parent is set to the new node."""
    return submenu_with_id(label, "", items)


def submenu_with_id(label, id, items=None):
    """Same as :func:`submenu` but with an id, so it can be found later."""
    result = MenuNode(label=label, id=id, type=ItemType.SUBMENU)
    if items:
        result.children = items
    # Fix up parent pointers
    for item in result.children:
        item._parent = result
    return result
