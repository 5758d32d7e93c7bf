from abc import ABC, abstractmethod


class StatementHandler(ABC):
    """Anything that can execute a complete statement for the client.

    A handler may send the statement over a socket to a server, run it
    in-process, or interpret it itself; the session loop only cares about
    the returned ``CommandResult``.
    """

    def startup(self):
        pass

    @abstractmethod
    def handle(self, statement):
        """Executes ``statement`` (terminator included) and returns a
        ``CommandResult``."""

    def shutdown(self):
        pass
