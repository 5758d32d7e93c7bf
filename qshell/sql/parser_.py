import sly

from .lexer import CommandLexer
from .ast import ExitCommand, SetProperty, ShowProperties, ShowProperty
from qshell.errno.errors import ParsingException


class CommandParser(sly.Parser):
    tokens = CommandLexer.tokens

    @_('command SEMICOLON',
       'command')
    def statement(self, p):
        return p.command

    @_('EXIT',
       'QUIT')
    def command(self, p):
        return ExitCommand()

    @_('SET PROPERTY property_name EQ literal')
    def command(self, p):
        return SetProperty(name=p.property_name, value=p.literal)

    @_('SHOW PROPERTIES')
    def command(self, p):
        return ShowProperties()

    @_('SHOW PROPERTY property_name')
    def command(self, p):
        return ShowProperty(name=p.property_name)

    @_('ID',
       'QUOTE_STRING',
       'DQUOTE_STRING')
    def property_name(self, p):
        return p[0]

    @_('INTEGER',
       'QUOTE_STRING',
       'DQUOTE_STRING')
    def literal(self, p):
        return p[0]

    @_('TRUE')
    def literal(self, p):
        return True

    @_('FALSE')
    def literal(self, p):
        return False

    def error(self, p):
        if p:
            raise ParsingException(f"Syntax error at token {p.type}: \"{p.value}\"")
        else:
            raise ParsingException("Syntax error at EOF")
