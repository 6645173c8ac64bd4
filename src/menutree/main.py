import sys
import argparse
import logging
from pathlib import Path

# Local imports
from .loader import MenuConfigError, load_menu, save_menu
from .menu import ItemType

logger = logging.getLogger(__name__)

_MARKS = {
    ItemType.CHECKBOX: ("[x] ", "[ ] "),
    ItemType.RADIO: ("(*) ", "( ) "),
}


def format_node(node):
    """Single outline line for ``node``, without indentation."""
    if node.type is ItemType.SEPARATOR:
        return "-" * 10
    line = node.label
    if node.type in _MARKS:
        checked, unchecked = _MARKS[node.type]
        line = (checked if node.checked else unchecked) + line
    if node.is_submenu:
        line += " >"
    if node.accelerator is not None:
        line += f"  [{node.accelerator}]"
    if node.id:
        line += f"  #{node.id}"
    flags = [flag for flag in ('disabled', 'hidden') if getattr(node, flag)]
    if flags:
        line += f"  ({', '.join(flags)})"
    return line


def format_outline(nodes):
    """Indented outline of every node, two spaces per level."""
    lines = []
    stack = [(node, 0) for node in reversed(nodes)]
    while stack:
        node, depth = stack.pop()
        lines.append("  " * depth + format_node(node))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines)


def find_node(nodes, id):
    """First node with ``id`` in pre-order across several top level nodes."""
    for node in nodes:
        result = node.get_by_id(id)
        if result is not None:
            return result
    return None


def remove_node(nodes, id):
    """Remove the first match in pre-order from a list of top level nodes.

    Top level nodes are dropped from ``nodes`` itself and stay roots; deeper
    matches go through :meth:`MenuNode.remove_by_id`.
    """
    for index, node in enumerate(nodes):
        if node.id == id:
            del nodes[index]
            return True
        if node.is_submenu and node.remove_by_id(id):
            return True
    return False


def run(args):
    """Execute the command line request, returning the exit status."""
    try:
        nodes = load_menu(args.config)
    except MenuConfigError as e:
        logger.error(f"Failed to load config: {e}")
        return 1

    if args.find:
        node = find_node(nodes, args.find)
        if node is None:
            logger.error(f"No menu item with id {args.find!r}")
            return 1
        print(format_outline([node]))
        return 0

    if args.remove:
        if not remove_node(nodes, args.remove):
            logger.error(f"No menu item with id {args.remove!r}")
            return 1
        logger.info(f"Removed menu item {args.remove!r}")

    print(format_outline(nodes))

    if args.output:
        try:
            save_menu(nodes, args.output)
        except MenuConfigError as e:
            logger.error(f"Failed to save config: {e}")
            return 1
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inspect and edit menu trees")
    parser.add_argument("--config", type=Path, default=Path("menu.yaml"), help="Path to menu file")
    parser.add_argument("--find", metavar="ID", help="Show only the subtree with this id")
    parser.add_argument("--remove", metavar="ID", help="Remove the item with this id")
    parser.add_argument("--output", type=Path, help="Write the resulting menu to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
