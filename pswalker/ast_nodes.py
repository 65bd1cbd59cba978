import itertools
from enum import Enum


class NodeKind(Enum):
    SCRIPT_BLOCK = "script_block"
    STATEMENT_BLOCK = "statement_block"
    FUNCTION_DEFINITION = "function_definition"
    SCRIPT_BLOCK_EXPRESSION = "script_block_expression"
    PIPELINE = "pipeline"
    COMMAND = "command"
    COMMAND_EXPRESSION = "command_expression"
    ASSIGNMENT = "assignment"
    IF = "if"
    LOOP = "loop"
    BINARY = "binary"
    UNARY = "unary"
    VARIABLE = "variable"
    MEMBER_ACCESS = "member_access"
    INDEX = "index"
    CONVERT = "convert"
    ARRAY_LITERAL = "array_literal"
    CONSTANT = "constant"
    STRING_CONSTANT = "string_constant"
    EXPANDABLE_STRING = "expandable_string"
    ERROR = "error"


# Kinds that open a new script-block scope when nested below the root.
NESTED_SCOPE_KINDS = {NodeKind.SCRIPT_BLOCK}

_SCOPE_PREFIXES = ("global", "local", "private", "script", "using", "workflow")
_node_ids = itertools.count(1)


class ScriptExtent:
    """
    Source range of a node. Lines and columns are 1-based, end column exclusive.
    """

    __slots__ = ("file", "start_line", "start_column", "end_line", "end_column", "text")

    def __init__(self, start_line, start_column, end_line, end_column, text="", file=None):
        self.file = file
        self.start_line = start_line
        self.start_column = start_column
        self.end_line = end_line
        self.end_column = end_column
        self.text = text

    def __eq__(self, other):
        if not isinstance(other, ScriptExtent):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (
            self.file,
            self.start_line,
            self.start_column,
            self.end_line,
            self.end_column,
            self.text,
        )

    def __repr__(self):
        return (
            f"ScriptExtent({self.start_line}:{self.start_column}-"
            f"{self.end_line}:{self.end_column}, {self.text!r})"
        )


EMPTY_EXTENT = ScriptExtent(0, 0, 0, 0, "")


class VariablePath:
    """
    The path of a variable reference as written after the sigil, e.g. ``x``,
    ``env:Path`` or ``script:count``. All queries are case-insensitive.
    """

    __slots__ = ("user_path",)

    def __init__(self, user_path):
        self.user_path = user_path

    def _split(self):
        prefix, sep, rest = self.user_path.partition(":")
        if not sep or not prefix:
            return None, self.user_path
        return prefix, rest

    @property
    def is_script(self):
        prefix, _ = self._split()
        return prefix is not None and prefix.casefold() == "script"

    @property
    def is_global(self):
        prefix, _ = self._split()
        return prefix is not None and prefix.casefold() == "global"

    @property
    def is_local(self):
        prefix, _ = self._split()
        return prefix is None or prefix.casefold() == "local"

    @property
    def is_private(self):
        prefix, _ = self._split()
        return prefix is not None and prefix.casefold() == "private"

    @property
    def is_drive_qualified(self):
        prefix, _ = self._split()
        return prefix is not None and prefix.casefold() not in _SCOPE_PREFIXES

    @property
    def drive_name(self):
        if not self.is_drive_qualified:
            return None
        return self._split()[0]

    @property
    def unqualified_path(self):
        return self._split()[1]

    def __repr__(self):
        return f"VariablePath({self.user_path!r})"

    def __str__(self):
        return self.user_path


class Node:
    """
    One node of a script's syntax tree.

    Nodes compare by identity: two references to the same variable are two
    different nodes even when their text is equal.
    """

    def __init__(self, kind, children=None, extent=None, **attrs):
        self.node_id = next(_node_ids)
        self.kind = kind
        self.extent = extent or EMPTY_EXTENT
        self.parent = None
        self.children = []
        # Start offset of each child within this node's text, when known.
        self.child_offsets = []
        self.attrs = attrs
        for child in children or []:
            self.add_child(child)

    def add_child(self, child):
        if child is None:
            return
        child.parent = self
        self.children.append(child)

    def find_all(self, predicate, search_nested=True):
        from pswalker.ast_walker import find_all

        return find_all(self, predicate, search_nested=search_nested)

    # Assignment
    @property
    def left(self):
        if self.kind != NodeKind.ASSIGNMENT or not self.children:
            return None
        return self.children[0]

    @property
    def right(self):
        if self.kind != NodeKind.ASSIGNMENT or len(self.children) < 2:
            return None
        return self.children[1]

    @property
    def operator(self):
        return self.attrs.get("operator")

    # Variable
    @property
    def variable_path(self):
        return self.attrs.get("path")

    @property
    def splatted(self):
        return bool(self.attrs.get("splatted"))

    # Member access / command
    @property
    def name(self):
        return self.attrs.get("name")

    @property
    def value(self):
        return self.attrs.get("value")

    def __repr__(self):
        return f"Node({self.kind.name}, id={self.node_id}, {self.extent.text!r})"


def is_variable(node):
    return node is not None and node.kind == NodeKind.VARIABLE


def is_assignment(node):
    return node is not None and node.kind == NodeKind.ASSIGNMENT


def is_script_block(node):
    return node is not None and node.kind in NESTED_SCOPE_KINDS

