from .command_result import CommandResult
from .handler import StatementHandler
