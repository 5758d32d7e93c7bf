import logging
from configparser import Error as ConfigParserError

from qshell.properties.registry import (PropertyRegistry, BooleanValueValidator,
                                        StringValueValidator)
from qshell.client.interactive import CMDPROMPT_FIRST, CMDPROMPT_NEXT
from qshell.runtime import global_vars
from qshell.errno.errors import FatalError, PropertyError

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMAT = '%(asctime)s %(levelname)s [%(module)s] %(message)s'


def register_default_properties(registry):
    registry.add_property('shell.prompt', StringValueValidator(max_len=64),
                          CMDPROMPT_FIRST)
    registry.add_property('shell.continuation_prompt', StringValueValidator(max_len=64),
                          CMDPROMPT_NEXT)
    registry.add_property('shell.show_banner', BooleanValueValidator(), True)
    registry.add_property('log.level', StringValueValidator(enumvals=LOG_LEVELS),
                          'WARNING', readonly=True)
    # empty means stderr
    registry.add_property('log.file', StringValueValidator(), '',
                          readonly=True)


def init_properties(config_file=None):
    registry = PropertyRegistry()
    register_default_properties(registry)
    if config_file is not None:
        try:
            registry.load_file(config_file)
        except (OSError, ConfigParserError, PropertyError) as e:
            raise FatalError(f'Cannot load properties from {config_file}: {e}') from e
    global_vars.property_registry = registry
    return registry


def init_logger(registry):
    filename = registry.get_value('log.file')
    if filename:
        try:
            handler = logging.FileHandler(filename)
        except OSError as e:
            raise FatalError(f'Cannot open log file {filename}: {e}') from e
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(registry.get_value('log.level'))
    return handler


def init_all_components(config_file=None):
    registry = init_properties(config_file)
    init_logger(registry)
    registry.setup_completed()
    return registry
