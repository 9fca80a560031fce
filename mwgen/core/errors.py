"""Generator error taxonomy.

Library code raises these; the CLI converts them into log records and
process exit codes.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base class for every failure the generator reports to the user."""

    exit_code = 1


class UsageError(GeneratorError):
    """Missing or invalid required input. Raised before any parsing."""

    exit_code = 2


class ParseError(GeneratorError):
    """The module directory could not be read or parsed as Go source."""

    def __init__(self, file_path: str, message: str, line: Optional[int] = None):
        self.file_path = file_path
        self.line = line
        self.message = message
        location = f"{file_path}:{line}" if line else file_path
        super().__init__(f"{location}: {message}")


class InterfaceNotFound(GeneratorError):
    """No interface with the requested name exists in the module."""

    def __init__(self, interface_name: str, module_dir: str = ""):
        self.interface_name = interface_name
        self.module_dir = module_dir
        where = f" in {module_dir}" if module_dir else ""
        super().__init__(f"Interface not found: {interface_name}{where}")


class UnsupportedShape(GeneratorError):
    """A method returns more values than the configured policy accepts."""

    def __init__(self, interface_name: str, method_name: str, arity: int):
        self.interface_name = interface_name
        self.method_name = method_name
        self.arity = arity
        super().__init__(
            f"{interface_name}.{method_name} returns {arity} values; "
            f"only up to 2 are supported with the 'reject' policy"
        )
