from enum import Enum


class DiagnosticSeverity(Enum):
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
    PARSE_ERROR = "parse_error"


class RuleSeverity(Enum):
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
    PARSE_ERROR = "parse_error"


class SourceType(Enum):
    BUILTIN = "builtin"
    MANAGED = "managed"
    MODULE = "module"


class DiagnosticRecord:
    """
    A single finding produced by a rule.
    """

    def __init__(
        self,
        message,
        extent,
        rule_name,
        severity,
        script_path=None,
        rule_suppression_id=None,
        suggested_corrections=None,
        aux_data=None,
    ):
        self.message = message
        self.extent = extent
        self.rule_name = rule_name
        self.severity = severity
        self.script_path = script_path
        self.rule_suppression_id = rule_suppression_id
        self.suggested_corrections = suggested_corrections or []
        self.aux_data = aux_data

    @property
    def line(self):
        return self.extent.start_line if self.extent is not None else None

    @property
    def column(self):
        return self.extent.start_column if self.extent is not None else None

    def _key(self):
        return (
            self.message,
            self.extent,
            self.rule_name,
            self.severity,
            self.script_path,
            self.rule_suppression_id,
            tuple(self.suggested_corrections),
            self.aux_data,
        )

    def __eq__(self, other):
        if not isinstance(other, DiagnosticRecord):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"DiagnosticRecord({self.rule_name}, {self.severity.name}, "
            f"line={self.line}, {self.message!r})"
        )
