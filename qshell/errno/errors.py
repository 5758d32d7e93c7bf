class QShellInternalError(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.errno = 0
        self.msg = msg


class StatementError(QShellInternalError):
    """The statement failed but the session can go on."""
    def __init__(self, msg):
        super().__init__(msg)
        self.errno = 1


class FatalError(QShellInternalError):
    def __init__(self, msg):
        super().__init__(msg)
        self.errno = 2


class InputError(QShellInternalError):
    def __init__(self, cause):
        super().__init__(f'{cause.__class__.__name__}:  {cause}')
        self.errno = 10
        self.cause = cause


class DispatchError(QShellInternalError):
    def __init__(self, statement, cause):
        super().__init__(f'{cause.__class__.__name__}:  {cause}')
        self.errno = 11
        self.statement = statement
        self.cause = cause


class ParsingException(StatementError):
    def __init__(self, msg):
        super().__init__(msg)

        self.errno = 20


class PropertyError(StatementError):
    def __init__(self, msg):
        super().__init__(msg)

        self.errno = 21


class UnsupportedStatementError(StatementError):
    def __init__(self, msg):
        super().__init__(msg)

        self.errno = 22
