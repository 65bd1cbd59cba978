import unittest

from pswalker.ast_builder import (
    array,
    assign,
    binary,
    command,
    const,
    convert,
    error,
    expandable_string,
    expression,
    foreach,
    function,
    if_,
    index,
    member,
    pipeline,
    script,
    script_block,
    string,
    unary,
    var,
)
from pswalker.ast_nodes import Node, NodeKind
from pswalker.base_rule import InvalidInputError
from pswalker.diagnostics import DiagnosticSeverity, RuleSeverity, SourceType
from pswalker.helper import Helper, ScopeClassificationError, ScopeHelper
from pswalker.unused_variable_rule import UseDeclaredVarsMoreThanAssignments


RULE_NAME = "PSUseDeclaredVarsMoreThanAssignments"


def run_rule(ast, file_name="fixture.ps1", helper=None):
    rule = UseDeclaredVarsMoreThanAssignments(helper=helper)
    return list(rule.analyze_script(ast, file_name))


class UnclassifiableHelper(ScopeHelper):
    def is_variable_global_or_environment(self, var_node, ast):
        raise ScopeClassificationError("no scope information")

    def has_special_vars(self, name):
        raise ScopeClassificationError("no builtin list")


class RecordingHelper(Helper):
    def __init__(self):
        super().__init__()
        self.scope_queries = []

    def is_variable_global_or_environment(self, var_node, ast):
        self.scope_queries.append(var_node.variable_path.user_path)
        return super().is_variable_global_or_environment(var_node, ast)


class UseDeclaredVarsMoreThanAssignmentsTest(unittest.TestCase):
    def test_variable_assigned_once_and_never_used_is_reported(self):
        statement = assign(var("x"), const(1))
        records = run_rule(script(statement))

        self.assertEqual(len(records), 1)
        record = records[0]
        self.assertEqual(record.message, "The variable 'x' is assigned but never used.")
        self.assertIs(record.extent, statement.extent)
        self.assertEqual(record.extent.text, "$x = 1")
        self.assertEqual((record.line, record.column), (1, 1))
        self.assertEqual(record.severity, DiagnosticSeverity.WARNING)
        self.assertEqual(record.rule_name, RULE_NAME)
        self.assertEqual(record.script_path, "fixture.ps1")
        self.assertEqual(record.aux_data, "x")

    def test_variable_read_by_command_is_not_reported(self):
        ast = script(
            assign(var("x"), const(1)),
            command("Write-Output", var("x")),
        )
        self.assertEqual(run_rule(ast), [])

    def test_variable_read_in_another_assignment_is_not_reported(self):
        ast = script(
            assign(var("x"), const(1)),
            assign(var("y"), binary(var("x"), "+", const(1))),
            command("Write-Output", var("y")),
        )
        self.assertEqual(run_rule(ast), [])

    def test_use_before_assignment_counts(self):
        ast = script(
            command("Write-Output", var("x")),
            assign(var("x"), const(1)),
        )
        self.assertEqual(run_rule(ast), [])

    def test_self_reference_on_right_hand_side_counts_as_use(self):
        ast = script(assign(var("x"), binary(var("x"), "+", const(1))))
        self.assertEqual(run_rule(ast), [])

    def test_environment_variable_is_excluded(self):
        self.assertEqual(run_rule(script(assign(var("env:x"), const(1)))), [])

    def test_global_and_script_variables_are_excluded(self):
        ast = script(
            assign(var("global:counter"), const(1)),
            assign(var("script:cache"), string("a")),
            assign(var("SCRIPT:other"), string("b")),
        )
        self.assertEqual(run_rule(ast), [])

    def test_reassignment_reports_first_assignment_only(self):
        first = assign(var("x"), const(1))
        second = assign(var("x"), const(2))
        records = run_rule(script(first, second))

        self.assertEqual(len(records), 1)
        self.assertIs(records[0].extent, first.extent)
        self.assertEqual(records[0].line, 1)

    def test_reassignment_followed_by_use_is_not_reported(self):
        ast = script(
            assign(var("x"), const(1)),
            assign(var("x"), const(2)),
            command("Write-Output", var("x")),
        )
        self.assertEqual(run_rule(ast), [])

    def test_builtin_special_variable_is_excluded(self):
        self.assertEqual(run_rule(script(assign(var("_"), const(1)))), [])
        self.assertEqual(run_rule(script(assign(var("ErrorActionPreference"), string("Stop")))), [])

    def test_member_and_index_targets_are_not_tracked(self):
        ast = script(
            assign(member(var("obj"), "Prop"), const(1)),
            assign(index(var("list"), const(0)), const(2)),
        )
        self.assertEqual(run_rule(ast), [])

    def test_typed_and_array_targets_are_not_tracked(self):
        ast = script(
            assign(convert("int", var("typed")), const(1)),
            assign(array(var("first"), var("second")), array(const(1), const(2))),
            pipeline(expression(unary("-not ", var("typed"))), command("Out-Null")),
        )
        self.assertEqual(run_rule(ast), [])

    def test_name_matching_is_case_insensitive(self):
        ast = script(
            assign(var("Foo"), const(1)),
            command("Write-Output", var("foo")),
        )
        self.assertEqual(run_rule(ast), [])

    def test_reported_name_keeps_first_spelling(self):
        ast = script(
            assign(var("Total"), const(1)),
            assign(var("TOTAL"), const(2)),
        )
        records = run_rule(ast)

        self.assertEqual([r.aux_data for r in records], ["Total"])
        self.assertEqual(records[0].message, "The variable 'Total' is assigned but never used.")

    def test_multiple_unused_variables_are_reported_in_assignment_order(self):
        ast = script(
            assign(var("b"), const(1)),
            assign(var("a"), const(2)),
            assign(var("used"), const(3)),
            assign(var("c"), const(4)),
            command("Write-Output", var("used")),
        )
        records = run_rule(ast)

        self.assertEqual([r.aux_data for r in records], ["b", "a", "c"])
        self.assertEqual([r.line for r in records], [1, 2, 4])

    def test_use_inside_nested_script_block_counts(self):
        ast = script(
            assign(var("x"), const(1)),
            function("Show-Value", command("Write-Output", var("x"))),
        )
        self.assertEqual(run_rule(ast), [])

    def test_unused_assignment_inside_function_is_reported(self):
        inner = assign(var("tmp"), const(5))
        ast = script(function("Get-Thing", inner, command("Get-Date")))
        records = run_rule(ast)

        self.assertEqual(len(records), 1)
        self.assertIs(records[0].extent, inner.extent)
        self.assertEqual(records[0].extent.start_column, 22)

    def test_use_in_condition_loop_and_string_counts(self):
        ast = script(
            assign(var("limit"), const(3)),
            assign(var("items"), script_block(command("Get-ChildItem"))),
            assign(var("name"), string("world")),
            if_(binary(var("limit"), "-gt", const(0)), command("Write-Output", string("ok"))),
            foreach(var("item"), var("items"), command("Write-Output", var("item"))),
            command("Write-Output", expandable_string("hello ", var("name"))),
        )
        self.assertEqual(run_rule(ast), [])

    def test_compound_reassignment_counts_as_use(self):
        ast = script(
            assign(var("count"), const(0)),
            assign(var("count"), const(1), operator="+="),
        )
        self.assertEqual(run_rule(ast), [])

    def test_compound_first_assignment_is_tracked(self):
        first = assign(var("total"), const(1), operator="+=")
        records = run_rule(script(first, assign(var("total"), const(2))))

        self.assertEqual([r.aux_data for r in records], ["total"])
        self.assertIs(records[0].extent, first.extent)

    def test_empty_script_and_script_without_assignments(self):
        self.assertEqual(run_rule(script()), [])
        self.assertEqual(run_rule(script(command("Get-Process"), command("Write-Output", var("x")))), [])

    def test_partial_tree_with_error_nodes_is_analyzed(self):
        ast = script(
            error("$y = ", var("z")),
            assign(var("x"), const(1)),
            Node(NodeKind.ASSIGNMENT),
            Node(NodeKind.VARIABLE),
        )
        records = run_rule(ast)

        self.assertEqual([r.aux_data for r in records], ["x"])

    def test_null_ast_raises_before_traversal(self):
        rule = UseDeclaredVarsMoreThanAssignments()
        with self.assertRaises(InvalidInputError) as ctx:
            rule.analyze_script(None, "fixture.ps1")
        self.assertEqual(str(ctx.exception), "Ast cannot be null.")
        self.assertIsInstance(ctx.exception, ValueError)

    def test_analysis_is_idempotent_and_does_not_mutate_tree(self):
        ast = script(
            assign(var("a"), const(1)),
            assign(var("b"), const(2)),
            command("Write-Output", var("b")),
        )
        before = [(n.node_id, n.kind, n.extent) for n in ast.find_all(lambda n: True)]
        rule = UseDeclaredVarsMoreThanAssignments()

        first = list(rule.analyze_script(ast))
        second = list(rule.analyze_script(ast))
        after = [(n.node_id, n.kind, n.extent) for n in ast.find_all(lambda n: True)]

        self.assertEqual(first, second)
        self.assertEqual([r.aux_data for r in first], ["a"])
        self.assertEqual(before, after)

    def test_result_is_lazy(self):
        rule = UseDeclaredVarsMoreThanAssignments(helper=RecordingHelper())
        ast = script(assign(var("x"), const(1)))

        results = rule.analyze_script(ast)
        self.assertEqual(rule.helper.scope_queries, [])
        self.assertEqual(len(list(results)), 1)
        self.assertEqual(rule.helper.scope_queries, ["x"])

    def test_unclassifiable_variables_are_reported(self):
        ast = script(
            assign(var("env:x"), const(1)),
            assign(var("_"), const(2)),
        )
        records = run_rule(ast, helper=UnclassifiableHelper())

        self.assertEqual([r.aux_data for r in records], ["env:x", "_"])

    def test_other_helper_errors_propagate(self):
        class BrokenHelper(Helper):
            def has_special_vars(self, name):
                raise RuntimeError("boom")

        ast = script(assign(var("x"), const(1)))
        with self.assertRaises(RuntimeError):
            run_rule(ast, helper=BrokenHelper())

    def test_rule_metadata(self):
        rule = UseDeclaredVarsMoreThanAssignments()

        self.assertEqual(rule.get_name(), RULE_NAME)
        self.assertEqual(rule.get_common_name(), "Extra Variables")
        self.assertEqual(
            rule.get_description(),
            "Ensure declared variables are used elsewhere in the script and not just during assignment.",
        )
        self.assertEqual(rule.get_severity(), RuleSeverity.WARNING)
        self.assertEqual(rule.get_source_type(), SourceType.BUILTIN)
        self.assertEqual(rule.get_source_name(), "PS")


if __name__ == "__main__":
    unittest.main()
