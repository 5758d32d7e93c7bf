import logging
import sys
from enum import Enum

from qshell.client.line_source import StreamLineSource, has_console
from qshell.client.segmenter import InputBuffer, extract_statement
from qshell.errno.errors import InputError, DispatchError

# "first-line" and "subsequent-lines" command prompts
CMDPROMPT_FIRST = 'CMD> '
CMDPROMPT_NEXT = '   > '

WELCOME_BANNER = 'Welcome to qshell.  Exit with EXIT or QUIT command.\n'


class LoopState(Enum):
    AWAITING_INPUT = 0
    READING_CONTINUATION = 1
    EXITING = 2


class SessionState:
    def __init__(self, console_attached):
        # decided once when the session starts
        self.console_attached = console_attached
        self.exiting = False
        self.buffer = InputBuffer()
        self.loop_state = LoopState.AWAITING_INPUT


class InteractiveClient:
    """Reads text a line at a time, cuts it into semicolon-terminated
    statements and hands each of them to ``handler``.

    A statement may span any number of lines, and one line may hold or
    complete several statements. Semicolons inside single- or
    double-quoted strings do not end a statement. The session ends at end
    of input or when the handler returns a result asking to exit; a
    failing read or a failing statement is reported and the session goes
    on.
    """

    def __init__(self, handler, line_source=None, stdout=None,
                 console_attached=None, properties=None):
        self.handler = handler
        self.line_source = line_source if line_source is not None else StreamLineSource()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.properties = properties
        self._console_attached = console_attached
        self.session = None

    def _probe_console(self):
        if self._console_attached is not None:
            return self._console_attached
        # We don't look at the terminal directly, since a file redirected
        # onto the input must not get any prompts.
        return self.line_source.is_interactive() and has_console()

    def _get_property(self, name, default):
        if self.properties is None or not self.properties.has_property(name):
            return default
        return self.properties.get_value(name)

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def _prompt(self, session):
        if session.buffer:
            self._write(self._get_property('shell.continuation_prompt', CMDPROMPT_NEXT))
        else:
            self._write(self._get_property('shell.prompt', CMDPROMPT_FIRST))

    def _report_error(self, error):
        message = getattr(error, 'msg', str(error))
        self._write(f'Unexpected error:  {error.__class__.__name__}:  {message}\n')
        logging.error('Unexpected error', exc_info=getattr(error, 'cause', error))

    def run(self):
        self.handler.startup()
        try:
            self.mainloop()
        finally:
            self.handler.shutdown()

    def mainloop(self):
        session = self.session = SessionState(self._probe_console())
        if session.console_attached and self._get_property('shell.show_banner', True):
            self._write(WELCOME_BANNER + '\n')

        while not session.exiting:
            try:
                self._read_and_dispatch(session)
            except Exception as e:
                self._report_error(e)
            except KeyboardInterrupt:
                # drop the statement being typed and start over
                session.buffer.clear()
                session.loop_state = LoopState.AWAITING_INPUT
                self._write('\nKeyboardInterrupt\n')

        session.loop_state = LoopState.EXITING

    def _read_line(self):
        try:
            return self.line_source.read_line()
        except Exception as e:
            raise InputError(e) from e

    def _read_and_dispatch(self, session):
        if session.console_attached:
            self._prompt(session)

        line = self._read_line()
        if line is None:
            # end of input, an unterminated statement is dropped
            if session.buffer:
                logging.debug('Discarding incomplete statement at end of input: %r',
                              session.buffer.text)
            session.buffer.clear()
            session.exiting = True
            return

        session.buffer.append(line + '\n')

        while True:
            command = extract_statement(session.buffer)
            if command is None:
                break  # no more complete commands

            logging.debug('Command string:\n%s', command)
            if self._dispatch(command):
                session.buffer.clear()
                session.exiting = True
                return

        if session.buffer:
            session.loop_state = LoopState.READING_CONTINUATION
        else:
            session.loop_state = LoopState.AWAITING_INPUT

    def _dispatch(self, command):
        """Runs one statement, returns True if the session should end."""
        try:
            result = self.handler.handle(command)
            # results without is_exit() count as "keep going", like None
            is_exit = getattr(result, 'is_exit', None)
            return bool(callable(is_exit) and is_exit())
        except Exception as e:
            # the failing statement is not retried, the rest of the buffer
            # is still processed
            self._report_error(DispatchError(command, e))
            return False
