from pswalker.diagnostics import SourceType
from pswalker.strings import Strings, format_string


class InvalidInputError(ValueError):
    pass


class BaseRule:
    def analyze_script(self, ast, file_name=None):
        raise NotImplementedError("analyze_script() must be implemented")

    def get_name(self):
        raise NotImplementedError("get_name() must be implemented")

    def get_common_name(self):
        raise NotImplementedError("get_common_name() must be implemented")

    def get_description(self):
        raise NotImplementedError("get_description() must be implemented")

    def get_severity(self):
        raise NotImplementedError("get_severity() must be implemented")

    def get_source_type(self):
        return SourceType.BUILTIN

    def get_source_name(self):
        return format_string(Strings.SOURCE_NAME)

    def _qualified_name(self, rule_name):
        return format_string(Strings.NAMESPACE_FORMAT, self.get_source_name(), rule_name)
