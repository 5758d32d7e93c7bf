import re
import sly

from qshell.errno.errors import ParsingException

KEYWORDS = {
    'EXIT', 'QUIT', 'SET', 'SHOW', 'PROPERTY', 'PROPERTIES', 'TRUE', 'FALSE',
}


class CommandLexer(sly.Lexer):
    reflags = re.IGNORECASE
    ignore = ' \t\r'
    ignore_multi_comment = r'/\*[\s\S]*?\*/'
    ignore_line_comment = r'--[^\n]*'

    tokens = {
        # COMMANDS
        EXIT, QUIT, SET, SHOW, PROPERTY, PROPERTIES,

        # PUNCTUATION
        EQ, SEMICOLON,

        # DATA TYPES
        ID, INTEGER, QUOTE_STRING, DQUOTE_STRING, TRUE, FALSE,
    }

    EQ = r'='
    SEMICOLON = r';'

    # keywords are matched as identifiers first, so that names such as
    # "settings" are not split into SET + "tings"
    @_(r'[a-zA-Z_][a-zA-Z_$0-9]*(?:\.[a-zA-Z_$0-9]+)*')
    def ID(self, t):
        keyword = t.value.upper()
        if keyword in KEYWORDS:
            t.type = keyword
        return t

    @_(r'-?\d+')
    def INTEGER(self, t):
        t.value = int(t.value)
        return t

    @_(r"'[^']*'")
    def QUOTE_STRING(self, t):
        t.value = t.value[1:-1]
        return t

    @_(r'"[^"]*"')
    def DQUOTE_STRING(self, t):
        t.value = t.value[1:-1]
        return t

    @_(r'\n+')
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    def error(self, t):
        raise ParsingException(f'Illegal character "{t.value[0]}" at line {self.lineno}')
