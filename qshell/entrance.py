import sys
import time

from qshell.sql import (parse_command, is_builtin_command, ExitCommand,
                        SetProperty, ShowProperties, ShowProperty)
from qshell.server.command_result import CommandResult
from qshell.server.handler import StatementHandler
from qshell.runtime import global_vars
from qshell.errno.errors import StatementError, UnsupportedStatementError

PROPERTY_FIELDS = ('name', 'value', 'type', 'readonly')


def tell_session(errno, message, out=None):
    out = out if out is not None else sys.stdout
    print(f'ERROR({errno}): {message}', file=out)
    out.flush()


def is_empty_statement(statement):
    return not statement.strip().rstrip(';').strip()


class BuiltinCommandHandler(StatementHandler):
    """Runs the client's own commands (EXIT, QUIT, SET PROPERTY,
    SHOW PROPERTIES, SHOW PROPERTY) and passes every other statement to
    ``executor``, a callable returning a ``CommandResult``.
    """

    def __init__(self, registry=None, executor=None, stdout=None):
        self._registry = registry
        self.executor = executor
        self.stdout = stdout if stdout is not None else sys.stdout

    @property
    def registry(self):
        if self._registry is not None:
            return self._registry
        return global_vars.property_registry

    def handle(self, statement):
        start = time.monotonic()
        try:
            result = self.execute(statement)
        except StatementError as e:
            tell_session(e.errno, e.msg, out=self.stdout)
            return CommandResult(success=False)
        # other errors are not ours to report, the session loop does it

        if result is None:
            result = CommandResult()
        result.elapsed = time.monotonic() - start
        if not result.is_exit():
            print(repr(result), file=self.stdout)
            self.stdout.flush()
        return result

    def execute(self, statement):
        if is_empty_statement(statement):
            return CommandResult()
        if not is_builtin_command(statement):
            if self.executor is None:
                raise UnsupportedStatementError(
                    f'Statement is not supported by this client: {statement.strip()}')
            return self.executor(statement)

        command = parse_command(statement)
        if isinstance(command, ExitCommand):
            return CommandResult(terminate=True)
        elif isinstance(command, SetProperty):
            return self.set_property(command.name, command.value)
        elif isinstance(command, ShowProperty):
            return self.show_properties([command.name])
        elif isinstance(command, ShowProperties):
            return self.show_properties(self.registry.get_all_property_names())
        raise UnsupportedStatementError(f'Unknown command {command}')

    def set_property(self, name, value):
        value = self.registry.set_value(name, value)
        return CommandResult(notice=f'Property "{name}" set to {value!r}.')

    def show_properties(self, names):
        registry = self.registry
        result = CommandResult(field_names=PROPERTY_FIELDS, rows=[])
        for name in names:
            # raises for unknown names
            readonly = registry.is_readonly(name)
            result.add_row((name.lower(), registry.get_value(name),
                            registry.get_type_name(name), readonly))
        return result
