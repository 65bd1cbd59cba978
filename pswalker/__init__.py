from pswalker.ast_nodes import Node, NodeKind, ScriptExtent, VariablePath
from pswalker.ast_walker import find_all, walk_ast
from pswalker.base_rule import BaseRule, InvalidInputError
from pswalker.diagnostics import DiagnosticRecord, DiagnosticSeverity, RuleSeverity, SourceType
from pswalker.engine_factory import build_engine
from pswalker.helper import Helper, ScopeClassificationError, ScopeHelper
from pswalker.rule_engine import RuleEngine
from pswalker.unused_variable_rule import UseDeclaredVarsMoreThanAssignments


__version__ = "0.1.0"

__all__ = [
    "BaseRule",
    "DiagnosticRecord",
    "DiagnosticSeverity",
    "Helper",
    "InvalidInputError",
    "Node",
    "NodeKind",
    "RuleEngine",
    "RuleSeverity",
    "ScopeClassificationError",
    "ScopeHelper",
    "ScriptExtent",
    "SourceType",
    "UseDeclaredVarsMoreThanAssignments",
    "VariablePath",
    "build_engine",
    "find_all",
    "walk_ast",
]
