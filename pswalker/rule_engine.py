import logging


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Runs a collection of script rules over one AST and collects
    their diagnostics in source order.
    """

    def __init__(self, rules):
        self.rules = rules

    def run(self, ast, file_name=None):
        records = []

        for rule in self.rules:
            results = list(rule.analyze_script(ast, file_name))
            logger.debug("%s produced %d diagnostic(s)", rule.get_name(), len(results))
            records.extend(results)

        def position_key(indexed):
            index, record = indexed
            if record.extent is None:
                return (10**9, 10**9, index)
            return (record.extent.start_line, record.extent.start_column, index)

        return [record for _, record in sorted(enumerate(records), key=position_key)]
