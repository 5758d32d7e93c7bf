from itertools import islice

from .parser_ import CommandParser
from .lexer import CommandLexer
from .ast import ExitCommand, SetProperty, ShowProperties, ShowProperty
from qshell.errno.errors import ParsingException

qshell_lexer = CommandLexer()
qshell_parser = CommandParser()

# leading tokens that make a statement one of the client's own commands;
# SET and SHOW alone are left to the executor (SHOW TABLES, SET search_path)
BUILTIN_LEADING_TOKENS = {
    ('EXIT',),
    ('QUIT',),
    ('SET', 'PROPERTY'),
    ('SHOW', 'PROPERTY'),
    ('SHOW', 'PROPERTIES'),
}


def parse_command(text):
    return qshell_parser.parse(qshell_lexer.tokenize(text))


def is_builtin_command(text):
    # tokenize() is lazy, only the first two tokens get lexed
    try:
        types = tuple(t.type for t in islice(qshell_lexer.tokenize(text), 2))
    except ParsingException:
        return False
    return types[:1] in BUILTIN_LEADING_TOKENS or types in BUILTIN_LEADING_TOKENS
