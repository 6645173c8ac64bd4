"""Menu structure and node representation."""
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ItemType(Enum):
    TEXT = "Text"
    SEPARATOR = "Separator"
    CHECKBOX = "Checkbox"
    RADIO = "Radio"
    SUBMENU = "Submenu"


class Role(Enum):
    """Predefined platform menus a node can stand in for."""
    NONE = ""
    APP_MENU = "AppMenu"
    EDIT_MENU = "EditMenu"
    WINDOW_MENU = "WindowMenu"


class MenuNode:
    """Represents a single item in the menu tree.

    Only SUBMENU nodes own children. Every child keeps a back-reference to
    the node whose ``children`` list holds it; that reference is maintained
    by the mutators below and must not be assigned by callers.
    """

    def __init__(self, label="", id="", type=ItemType.TEXT, role=Role.NONE,
                 accelerator=None, disabled=False, hidden=False, checked=False,
                 children=None):
        self.id = id
        self.label = label
        self.role = role
        self.accelerator = accelerator
        self.type = type
        self.disabled = disabled
        self.hidden = hidden
        self.checked = checked
        self.children = children if children else []
        self._parent = None

    def __repr__(self):
        return f"MenuNode(type={self.type.value}, id={self.id!r}, label={self.label!r})"

    @property
    def parent(self):
        """The owning submenu node, or None for a top level node."""
        return self._parent

    @property
    def is_submenu(self):
        return self.type is ItemType.SUBMENU

    def _adopt(self, item):
        if item._parent is not None and item._parent is not self:
            logger.warning(f"{item!r} is still attached to {item._parent!r}; detach it first")
        item._parent = self

    def append(self, item):
        """Add ``item`` as the last child.

        Returns:
            False without touching either node if this is not a submenu
        """
        if not self.is_submenu:
            logger.debug(f"append on non-submenu {self!r}")
            return False
        self._adopt(item)
        self.children.append(item)
        return True

    def prepend(self, item):
        """Add ``item`` as the first child.

        Returns:
            False without touching either node if this is not a submenu
        """
        if not self.is_submenu:
            logger.debug(f"prepend on non-submenu {self!r}")
            return False
        self._adopt(item)
        self.children.insert(0, item)
        return True

    def insert_after(self, item):
        """Insert ``item`` right after this node in the parent's children.

        Returns:
            False if this node is a top level node (it has no siblings)
        """
        if self._parent is None:
            logger.debug(f"insert_after on top level node {self!r}")
            return False
        return self._parent._insert_new_item_after_given_item(self, item)

    def insert_before(self, item):
        """Insert ``item`` right before this node in the parent's children.

        Returns:
            False if this node is a top level node (it has no siblings)
        """
        if self._parent is None:
            logger.debug(f"insert_before on top level node {self!r}")
            return False
        return self._parent._insert_new_item_before_given_item(self, item)

    def _insert_new_item_after_given_item(self, target, new_item):
        if not self.is_submenu:
            return False
        index = self._get_item_index(target)
        if index == -1:
            logger.debug(f"{target!r} not found in {self!r}")
            return False
        return self._insert_item_at_index(index + 1, new_item)

    def _insert_new_item_before_given_item(self, target, new_item):
        if not self.is_submenu:
            return False
        index = self._get_item_index(target)
        if index == -1:
            logger.debug(f"{target!r} not found in {self!r}")
            return False
        return self._insert_item_at_index(index, new_item)

    def _get_item_index(self, target):
        """Position of ``target`` in children by identity, -1 if absent."""
        if not self.is_submenu:
            return -1
        for index, item in enumerate(self.children):
            if item is target:
                return index
        return -1

    def _insert_item_at_index(self, index, item):
        # index == len(children) appends; anything past that is out of bounds
        if index < 0 or index > len(self.children):
            logger.debug(f"index {index} out of bounds for {self!r}")
            return False
        self._adopt(item)
        self.children.insert(index, item)
        return True

    def walk(self):
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def get_by_id(self, id):
        """Return the first node in pre-order (this node included) with ``id``."""
        for node in self.walk():
            if node.id == id:
                return node
        return None

    def remove_by_id(self, id):
        """Remove the first descendant with ``id``, searching in pre-order.

        The receiver itself is never matched. Only submenu children are
        searched below their own level. The removed node becomes the top
        level node of its detached subtree.

        Returns:
            True if a node was removed, False if nothing matched
        """
        # Indices stay valid: the walk ends at the first (and only) removal
        stack = [(self, index) for index in reversed(range(len(self.children)))]
        while stack:
            owner, index = stack.pop()
            item = owner.children[index]
            if item.id == id:
                del owner.children[index]
                item._parent = None
                return True
            if item.is_submenu:
                stack.extend((item, i) for i in reversed(range(len(item.children))))
        logger.debug(f"no node with id {id!r} below {self!r}")
        return False
