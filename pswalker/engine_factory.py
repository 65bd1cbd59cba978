from pswalker.rule_engine import RuleEngine
from pswalker.unused_variable_rule import UseDeclaredVarsMoreThanAssignments


BUILTIN_RULES = (UseDeclaredVarsMoreThanAssignments,)


def _rule_names(rule):
    return {rule.get_name().casefold(), rule.get_common_name().casefold()}


def _select(rules, names, option):
    if isinstance(names, str):
        names = (names,)
    wanted = {name.strip().casefold() for name in names if name.strip()}
    known = set()
    for rule in rules:
        known |= _rule_names(rule)

    unknown = sorted(wanted - known)
    if unknown:
        valid = sorted(rule.get_name() for rule in rules)
        raise ValueError(
            f"Unknown rule name(s) in {option}: "
            + ", ".join(unknown)
            + ". Valid rules: "
            + ", ".join(valid)
            + "."
        )
    return [rule for rule in rules if _rule_names(rule) & wanted]


def build_engine(include_rules=None, exclude_rules=None, helper=None):
    available = [rule_class(helper=helper) for rule_class in BUILTIN_RULES]
    rules = available

    if include_rules:
        rules = _select(available, include_rules, "include_rules")

    if exclude_rules:
        excluded = _select(available, exclude_rules, "exclude_rules")
        rules = [rule for rule in rules if rule not in excluded]

    return RuleEngine(rules)
