"""Reading and writing menu trees as YAML."""
import logging
import yaml

from .accelerator import Accelerator, AcceleratorError
from .builders import submenu_with_id
from .menu import ItemType, MenuNode, Role

logger = logging.getLogger(__name__)


class MenuConfigError(Exception):
    """Raised when a menu definition cannot be loaded."""


def _parse_enum(enum_cls, value, where):
    try:
        return enum_cls(value)
    except ValueError:
        raise MenuConfigError(f"{where}: unknown {enum_cls.__name__} {value!r}") from None


def _parse_text(item, name, where):
    """String field; a blank value (``id:``) means empty, not 'None'."""
    value = item.get(name)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise MenuConfigError(f"{where}: '{name}' must be a string")
    return str(value)


def _parse_flag(item, name, where):
    value = item.get(name)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MenuConfigError(f"{where}: '{name}' must be true or false, got {value!r}")
    return value


def _parse_item(item, where):
    if not isinstance(item, dict):
        raise MenuConfigError(f"{where}: expected a mapping, got {type(item).__name__}")

    # A bare 'items:' loads as None and still marks a submenu
    raw_children = item.get('items')
    default_type = ItemType.SUBMENU.value if 'items' in item else ItemType.TEXT.value
    item_type = _parse_enum(ItemType, item.get('type', default_type), where)
    if raw_children and item_type is not ItemType.SUBMENU:
        raise MenuConfigError(f"{where}: only Submenu items may have 'items'")

    accelerator = item.get('accelerator')
    if accelerator is not None:
        try:
            accelerator = Accelerator.parse(accelerator)
        except AcceleratorError as e:
            raise MenuConfigError(f"{where}: {e}") from e

    label = _parse_text(item, 'label', where)
    item_id = _parse_text(item, 'id', where)
    if item_type is ItemType.SUBMENU:
        # parent links are rebuilt by the builder, never read from input
        node = submenu_with_id(label, item_id, parse_menu(raw_children or [], where))
    else:
        node = MenuNode(label=label, id=item_id, type=item_type)

    node.role = _parse_enum(Role, item.get('role', ''), where)
    node.accelerator = accelerator
    node.disabled = _parse_flag(item, 'disabled', where)
    node.hidden = _parse_flag(item, 'hidden', where)
    node.checked = _parse_flag(item, 'checked', where)
    return node


def parse_menu(raw_items, where="menu"):
    """Build menu nodes from a list of mappings.

    Args:
        raw_items: List of dictionaries, as found under the ``menu`` key
        where: Location prefix used in error messages

    Returns:
        List of top level MenuNode objects
    """
    if not isinstance(raw_items, list):
        raise MenuConfigError(f"{where}: expected a list of items")
    return [_parse_item(item, f"{where}[{i}]") for i, item in enumerate(raw_items)]


def dump_menu(nodes):
    """Inverse of :func:`parse_menu`; default values are left out."""
    raw_items = []
    for node in nodes:
        item = {'type': node.type.value}
        if node.id:
            item['id'] = node.id
        if node.label:
            item['label'] = node.label
        if node.role is not Role.NONE:
            item['role'] = node.role.value
        if node.accelerator is not None:
            item['accelerator'] = str(node.accelerator)
        for flag in ('disabled', 'hidden', 'checked'):
            if getattr(node, flag):
                item[flag] = True
        if node.is_submenu:
            item['items'] = dump_menu(node.children)
        raw_items.append(item)
    return raw_items


def load_menu(path):
    """Load menu nodes from a YAML file.

    The file holds either a bare list of items or a mapping with a
    ``menu`` key.

    Raises:
        MenuConfigError: if the file cannot be read or is malformed
    """
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load menu: {e}")
        raise MenuConfigError(f"Failed to load {path}: {e}") from e

    if isinstance(data, dict):
        if 'menu' not in data:
            raise MenuConfigError(f"{path}: missing 'menu' key")
        data = data['menu']
    nodes = parse_menu(data if data is not None else [])
    logger.info(f"Loaded {sum(1 for n in nodes for _ in n.walk())} menu items from {path}")
    return nodes


def save_menu(nodes, path):
    """Write menu nodes to a YAML file under a ``menu`` key.

    Raises:
        MenuConfigError: if the file cannot be written
    """
    try:
        with open(path, 'w') as f:
            yaml.safe_dump({'menu': dump_menu(nodes)}, f, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to save menu: {e}")
        raise MenuConfigError(f"Failed to save {path}: {e}") from e
    logger.info(f"Saved menu to {path}")
