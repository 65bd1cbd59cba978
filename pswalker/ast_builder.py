"""
Builders for script syntax trees.

Each builder renders the PowerShell text of the node it creates, so a tree
assembled with :func:`script` carries real line/column extents::

    ast = script(
        assign(var("x"), const(1)),
        command("Write-Output", var("x")),
    )

Statements are laid out one per line. Nested blocks stay on one line.
"""

from pswalker.ast_nodes import Node, NodeKind, ScriptExtent, VariablePath


def _compose(kind, parts, **attrs):
    texts = []
    children = []
    offsets = []
    pos = 0
    for part in parts:
        if part is None:
            continue
        if isinstance(part, Node):
            children.append(part)
            offsets.append(pos)
            text = part.extent.text
        else:
            text = str(part)
        texts.append(text)
        pos += len(text)

    text = "".join(texts)
    node = Node(kind, children, extent=ScriptExtent(1, 1, 1, 1 + len(text), text), **attrs)
    node.child_offsets = offsets
    return node


def _joined(items, sep):
    parts = []
    for i, item in enumerate(items):
        if i:
            parts.append(sep)
        parts.append(item)
    return parts


def _braced(statements):
    if not statements:
        return ["{ }"]
    return ["{ "] + _joined(statements, "; ") + [" }"]


def _place(node, line, column, file):
    stack = [(node, column)]
    while stack:
        current, start = stack.pop()
        text = current.extent.text
        current.extent = ScriptExtent(line, start, line, start + len(text), text, file)
        for child, offset in zip(current.children, current.child_offsets):
            stack.append((child, start + offset))


def var(user_path, splatted=False):
    sigil = "@" if splatted else "$"
    return _compose(NodeKind.VARIABLE, [sigil + user_path], path=VariablePath(user_path), splatted=splatted)


def const(value):
    return _compose(NodeKind.CONSTANT, [repr(value) if isinstance(value, float) else str(value)], value=value)


def string(value):
    return _compose(NodeKind.STRING_CONSTANT, [f"'{value}'"], value=value)


def expandable_string(*parts):
    """Double-quoted string; ``Node`` parts are embedded expressions."""
    return _compose(NodeKind.EXPANDABLE_STRING, ['"', *parts, '"'])


def member(target, name):
    return _compose(NodeKind.MEMBER_ACCESS, [target, ".", name], name=name)


def index(target, key):
    return _compose(NodeKind.INDEX, [target, "[", key, "]"])


def convert(type_name, target):
    return _compose(NodeKind.CONVERT, [f"[{type_name}]", target], name=type_name)


def array(*items):
    return _compose(NodeKind.ARRAY_LITERAL, _joined(items, ", "))


def binary(left, operator, right):
    return _compose(NodeKind.BINARY, [left, f" {operator} ", right], operator=operator)


def unary(operator, operand):
    return _compose(NodeKind.UNARY, [operator, operand], operator=operator)


def assign(left, right, operator="="):
    return _compose(NodeKind.ASSIGNMENT, [left, f" {operator} ", right], operator=operator)


def command(name, *args):
    parts = [name]
    for arg in args:
        parts.extend([" ", arg])
    return _compose(NodeKind.COMMAND, parts, name=name)


def expression(expr):
    return _compose(NodeKind.COMMAND_EXPRESSION, [expr])


def pipeline(*elements):
    return _compose(NodeKind.PIPELINE, _joined(elements, " | "))


def script_block(*statements):
    body = _compose(NodeKind.SCRIPT_BLOCK, _braced(statements))
    return _compose(NodeKind.SCRIPT_BLOCK_EXPRESSION, [body])


def function(name, *statements):
    body = _compose(NodeKind.SCRIPT_BLOCK, _braced(statements))
    return _compose(NodeKind.FUNCTION_DEFINITION, [f"function {name} ", body], name=name)


def if_(condition, *statements):
    body = _compose(NodeKind.STATEMENT_BLOCK, _braced(statements))
    return _compose(NodeKind.IF, ["if (", condition, ") ", body])


def foreach(variable, collection, *statements):
    body = _compose(NodeKind.STATEMENT_BLOCK, _braced(statements))
    return _compose(NodeKind.LOOP, ["foreach (", variable, " in ", collection, ") ", body], name="foreach")


def error(text, *children):
    """Placeholder left by an error-tolerant parser for text it could not parse."""
    return _compose(NodeKind.ERROR, [text, *children])


def script(*statements, file=None):
    """
    Root script block with one statement per line.
    """
    statements = [statement for statement in statements if statement is not None]
    root = Node(NodeKind.SCRIPT_BLOCK, statements)
    lines = []
    for number, statement in enumerate(statements, start=1):
        _place(statement, number, 1, file)
        lines.append(statement.extent.text)

    text = "\n".join(lines)
    end_line = max(len(lines), 1)
    end_column = len(lines[-1]) + 1 if lines else 1
    root.extent = ScriptExtent(1, 1, end_line, end_column, text, file)
    return root
