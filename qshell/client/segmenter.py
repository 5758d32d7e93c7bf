from enum import Enum

STATEMENT_TERMINATOR = ';'


class QuoteState(Enum):
    NORMAL = 0
    IN_SINGLE_QUOTE = 1
    IN_DOUBLE_QUOTE = 2


_OPENING_QUOTES = {
    "'": QuoteState.IN_SINGLE_QUOTE,
    '"': QuoteState.IN_DOUBLE_QUOTE,
}
_CLOSING_QUOTES = {
    QuoteState.IN_SINGLE_QUOTE: "'",
    QuoteState.IN_DOUBLE_QUOTE: '"',
}


class InputBuffer:
    """Text accumulated from one or more input lines of a session."""

    def __init__(self, text=''):
        self._text = text

    @property
    def text(self):
        return self._text

    def append(self, text):
        self._text += text

    def clear(self):
        self._text = ''

    def consume(self, n):
        """Removes the first ``n`` characters and returns them."""
        head = self._text[:n]
        self._text = self._text[n:]
        return head

    def lstrip(self):
        self._text = self._text.lstrip()

    def __len__(self):
        return len(self._text)

    def __str__(self):
        return self._text

    def __repr__(self):
        return f'<InputBuffer text={self._text!r}>'


def find_terminator(text):
    """Returns the index of the first terminator that is not enclosed in
    single or double quotes, or -1 if there is none.

    A quote character always toggles the quoting state; doubled or
    backslash-escaped quotes are not recognized.
    """
    state = QuoteState.NORMAL
    for i, ch in enumerate(text):
        if state is QuoteState.NORMAL:
            if ch == STATEMENT_TERMINATOR:
                return i
            state = _OPENING_QUOTES.get(ch, state)
        elif ch == _CLOSING_QUOTES[state]:
            state = QuoteState.NORMAL
    return -1


def extract_statement(buffer):
    """Removes the first complete statement from ``buffer`` and returns it,
    terminator included.

    Whitespace following the statement is dropped from the buffer so the
    next statement starts at the buffer head. Returns None and leaves the
    buffer untouched if no complete statement is available yet.
    """
    end = find_terminator(buffer.text)
    if end < 0:
        return None

    statement = buffer.consume(end + 1)
    buffer.lstrip()
    return statement
