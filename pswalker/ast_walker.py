import logging

from pswalker.ast_nodes import is_script_block


logger = logging.getLogger(__name__)


def walk_ast(node, nodes, *, search_nested=True, debug=False):
    """
    Walks a script AST in pre-order and collects every node into a flat
    list for the rules.

    When ``search_nested`` is False the walk does not enter script blocks
    nested below the root (function bodies, ``{ ... }`` expressions).
    """

    stack = [(node, True)]
    while stack:
        current, is_root = stack.pop()
        if current is None:
            continue
        if not is_root and not search_nested and is_script_block(current):
            continue

        nodes.append(current)

        if debug:
            logger.debug("VISITING: %s %s", current.kind.name, current.extent.text)

        # Reversed so the first child is visited first.
        stack.extend((child, False) for child in reversed(current.children))

    return nodes


def find_all(root, predicate, search_nested=True):
    """
    Returns every node under ``root`` (root included) that satisfies
    ``predicate``, in pre-order.
    """
    return [node for node in walk_ast(root, [], search_nested=search_nested) if predicate(node)]

