class Strings:
    SOURCE_NAME = "PS"
    NAMESPACE_FORMAT = "{0}{1}"
    NULL_AST_ERROR_MESSAGE = "Ast cannot be null."

    USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_NAME = "UseDeclaredVarsMoreThanAssignments"
    USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_COMMON_NAME = "Extra Variables"
    USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_DESCRIPTION = (
        "Ensure declared variables are used elsewhere in the script "
        "and not just during assignment."
    )
    USE_DECLARED_VARS_MORE_THAN_ASSIGNMENTS_ERROR = "The variable '{0}' is assigned but never used."


def format_string(template, *args):
    return template.format(*args)
