class ScopeClassificationError(LookupError):
    """
    Raised by a scope helper that cannot classify a variable.
    """


class ScopeHelper:
    """
    Scope queries the rules need about variables.
    """

    def is_variable_global_or_environment(self, var_node, ast):
        raise NotImplementedError("is_variable_global_or_environment() must be implemented")

    def has_special_vars(self, name):
        raise NotImplementedError("has_special_vars() must be implemented")


# Automatic and preference variables provided by the PowerShell engine.
SPECIAL_VARIABLES = (
    "_",
    "$",
    "^",
    "?",
    "args",
    "ConsoleFileName",
    "Error",
    "Event",
    "EventArgs",
    "EventSubscriber",
    "ExecutionContext",
    "false",
    "foreach",
    "HOME",
    "Host",
    "input",
    "LASTEXITCODE",
    "Matches",
    "MyInvocation",
    "NestedPromptLevel",
    "null",
    "OFS",
    "PID",
    "PROFILE",
    "PSBoundParameters",
    "PSCmdlet",
    "PSCommandPath",
    "PSCulture",
    "PSDebugContext",
    "PSHOME",
    "PSItem",
    "PSScriptRoot",
    "PSSenderInfo",
    "PSUICulture",
    "PSVersionTable",
    "PWD",
    "Sender",
    "ShellId",
    "StackTrace",
    "switch",
    "this",
    "true",
    # Preference variables
    "ConfirmPreference",
    "DebugPreference",
    "ErrorActionPreference",
    "ErrorView",
    "FormatEnumerationLimit",
    "InformationPreference",
    "LogCommandHealthEvent",
    "MaximumHistoryCount",
    "OutputEncoding",
    "ProgressPreference",
    "PSDefaultParameterValues",
    "PSEmailServer",
    "PSModuleAutoLoadingPreference",
    "PSSessionApplicationName",
    "PSSessionConfigurationName",
    "PSSessionOption",
    "VerbosePreference",
    "WarningPreference",
    "WhatIfPreference",
)


class Helper(ScopeHelper):
    """
    Default scope helper: ``$global:`` and ``$env:`` variables are global or
    environment, and the engine's automatic variables are special.
    """

    _instance = None

    def __init__(self, special_variables=SPECIAL_VARIABLES):
        self._special = {name.casefold() for name in special_variables}

    @classmethod
    def instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def is_variable_global_or_environment(self, var_node, ast):
        path = var_node.variable_path
        if path is None:
            raise ScopeClassificationError(f"Node {var_node!r} has no variable path")
        if path.is_global:
            return True
        drive = path.drive_name
        return drive is not None and drive.casefold() == "env"

    def has_special_vars(self, name):
        if not name:
            return False
        _, sep, rest = name.partition(":")
        unqualified = rest if sep else name
        return unqualified.casefold() in self._special
