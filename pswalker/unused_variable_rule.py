import logging

from pswalker.ast_nodes import is_assignment, is_variable
from pswalker.ast_walker import find_all
from pswalker.base_rule import BaseRule, InvalidInputError
from pswalker.diagnostics import DiagnosticRecord, DiagnosticSeverity, RuleSeverity
from pswalker.helper import Helper, ScopeClassificationError
from pswalker.strings import Strings, format_string
from pswalker.structures import CaseInsensitiveDict


logger = logging.getLogger(__name__)


class UseDeclaredVarsMoreThanAssignments(BaseRule):
    """
    Warns when a variable is assigned but never used outside its own assignment.
    """

    def __init__(self, helper=None):
        self.helper = helper or Helper.instance()

    def analyze_script(self, ast, file_name=None):
        """
        Returns a generator of diagnostics, one per variable whose only
        references are the targets of its assignments.

        Raises InvalidInputError immediately when ``ast`` is None.
        """
        if ast is None:
            raise InvalidInputError(Strings.NULL_AST_ERROR_MESSAGE)
        return self._analyze(ast, file_name)

    def _analyze(self, ast, file_name):
        assignments, targets = self._tracked_assignments(ast)

        for var_node in find_all(ast, is_variable, search_nested=True):
            if var_node.variable_path is None:
                continue
            var_key = var_node.variable_path.user_path
            if var_key not in assignments:
                continue

            in_assignment = any(
                target is var_node
                for other in targets[var_key]
                for target in find_all(other.left, is_variable, search_nested=True)
            )
            if not in_assignment:
                logger.debug("'%s' is used on line %s", var_key, var_node.extent.start_line)
                assignments.pop(var_key)

            if self._is_special(var_key):
                logger.debug("'%s' is a builtin variable", var_key)
                assignments.pop(var_key)

        for key, assignment in assignments.items():
            yield DiagnosticRecord(
                format_string(Strings.USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_ERROR, key),
                assignment.extent,
                self.get_name(),
                DiagnosticSeverity.WARNING,
                script_path=file_name,
                aux_data=key,
            )

    def _tracked_assignments(self, ast):
        assignments = CaseInsensitiveDict()
        # First and plain-reassignment targets per name; these are not uses.
        targets = CaseInsensitiveDict()

        for assignment in find_all(ast, is_assignment, search_nested=True):
            # Only plain variables are tracked; $foo.Bar = 1 or $foo[0] = 1 are not.
            target = assignment.left
            if not is_variable(target):
                continue

            path = target.variable_path
            if path is None:
                continue
            if self._is_global_or_environment(target, ast) or path.is_script:
                logger.debug("Skipping global/environment/script variable '%s'", path.user_path)
                continue

            if path.user_path not in assignments:
                assignments[path.user_path] = assignment
                targets[path.user_path] = [assignment]
            elif assignment.operator in (None, "="):
                # $x += 1 reads $x, so only plain reassignment targets are not uses.
                targets[path.user_path].append(assignment)

        return assignments, targets

    def _is_global_or_environment(self, var_node, ast):
        try:
            return bool(self.helper.is_variable_global_or_environment(var_node, ast))
        except ScopeClassificationError as exc:
            # Unclassified variables are reported rather than hidden.
            logger.debug("Could not classify '%s': %s", var_node.variable_path, exc)
            return False

    def _is_special(self, name):
        try:
            return bool(self.helper.has_special_vars(name))
        except ScopeClassificationError as exc:
            logger.debug("Could not classify '%s': %s", name, exc)
            return False

    def get_name(self):
        return self._qualified_name(Strings.USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_NAME)

    def get_common_name(self):
        return format_string(Strings.USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_COMMON_NAME)

    def get_description(self):
        return format_string(Strings.USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_DESCRIPTION)

    def get_severity(self):
        return RuleSeverity.WARNING
