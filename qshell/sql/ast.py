class ASTNode:
    def __repr__(self):
        fields = ' '.join(f'{k}={v!r}' for k, v in self.__dict__.items()
                          if not k.startswith('_'))
        if fields:
            return f'<{self.__class__.__name__} {fields}>'
        return f'<{self.__class__.__name__}>'

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__


class ExitCommand(ASTNode):
    pass


class SetProperty(ASTNode):
    def __init__(self, name, value):
        self.name = name
        self.value = value


class ShowProperties(ASTNode):
    pass


class ShowProperty(ASTNode):
    def __init__(self, name):
        self.name = name
