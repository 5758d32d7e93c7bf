import os
from configparser import ConfigParser

from qshell.errno.errors import PropertyError


class PropertyValidator:
    """Checks a candidate value and returns it in its canonical type.

    Values may arrive as strings when they are read from a file, so every
    validator accepts the textual form as well.
    """
    type_name = 'any'

    def validate(self, name, value):
        return value


class IntegerValueValidator(PropertyValidator):
    type_name = 'integer'

    def __init__(self, min_val=0, max_val=65535):
        self.min_val = min_val
        self.max_val = max_val

    def validate(self, name, value):
        if isinstance(value, bool):
            raise PropertyError(f'Property "{name}" requires an integer value.')
        if isinstance(value, str):
            try:
                value = int(value.strip())
            except ValueError:
                raise PropertyError(f'Property "{name}" requires an integer value.')
        if not isinstance(value, int):
            raise PropertyError(f'Property "{name}" requires an integer value.')
        if not self.min_val <= value <= self.max_val:
            raise PropertyError(f'Property "{name}" must be between '
                                f'{self.min_val} and {self.max_val}.')
        return value


class BooleanValueValidator(PropertyValidator):
    type_name = 'boolean'

    TRUE_STRINGS = ('true', 'yes', 'on', '1')
    FALSE_STRINGS = ('false', 'no', 'off', '0')

    def validate(self, name, value):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in self.TRUE_STRINGS:
                return True
            if lowered in self.FALSE_STRINGS:
                return False
        raise PropertyError(f'Property "{name}" requires a boolean value.')


class StringValueValidator(PropertyValidator):
    type_name = 'string'

    def __init__(self, enumvals=None, max_len=1024):
        self.enumvals = enumvals
        self.max_len = max_len

    def validate(self, name, value):
        if not isinstance(value, str):
            raise PropertyError(f'Property "{name}" requires a string value.')
        if self.enumvals is not None and value not in self.enumvals:
            raise PropertyError(f'Property "{name}" must be one of '
                                f'{", ".join(self.enumvals)}.')
        if len(value) > self.max_len:
            raise PropertyError(f'Property "{name}" is limited to '
                                f'{self.max_len} characters.')
        return value


class PropertyDescriptor:
    def __init__(self, name, validator, initial_value, readonly=False):
        self.name = name
        self.validator = validator
        self.default = validator.validate(name, initial_value)
        self.readonly = readonly


class PropertyRegistry(ConfigParser):
    """Named, typed settings of the client.

    Components register their properties at start-up; afterwards they can
    be read and changed from the prompt with SET PROPERTY. Read-only
    properties may only be changed until ``setup_completed()`` is called.
    Values are kept as strings in the ``qshell`` section, so the registry
    can be written to and read back from an ini file.
    """
    DEFAULT_SECTION = 'qshell'

    def __init__(self):
        # prompts may contain '%', so no interpolation
        super().__init__(interpolation=None)
        super().add_section(PropertyRegistry.DEFAULT_SECTION)
        self._descriptors = {}
        self._setup = True

    def setup_completed(self):
        self._setup = False

    def in_setup(self):
        return self._setup

    def add_property(self, name, validator, initial_value, readonly=False):
        name = self.optionxform(name)
        descriptor = PropertyDescriptor(name, validator, initial_value, readonly)
        self._descriptors[name] = descriptor
        self.set(self.DEFAULT_SECTION, name, self._to_string(descriptor.default))

    def has_property(self, name):
        if name is None:
            raise ValueError('name cannot be None')
        return self.optionxform(name) in self._descriptors

    def get_all_property_names(self):
        return sorted(self._descriptors)

    def _get_descriptor(self, name):
        if name is None:
            raise ValueError('name cannot be None')
        descriptor = self._descriptors.get(self.optionxform(name))
        if descriptor is None:
            raise PropertyError(f'No property named "{name}"')
        return descriptor

    def is_readonly(self, name):
        return self._get_descriptor(name).readonly

    def get_type_name(self, name):
        return self._get_descriptor(name).validator.type_name

    def get_value(self, name):
        descriptor = self._get_descriptor(name)
        raw = self.get(self.DEFAULT_SECTION, descriptor.name,
                       fallback=self._to_string(descriptor.default))
        return descriptor.validator.validate(descriptor.name, raw)

    def get_default(self, name):
        return self._get_descriptor(name).default

    def _check_writable(self, descriptor):
        if descriptor.readonly and not self._setup:
            raise PropertyError(f'Property "{descriptor.name}" is read-only during '
                                f'normal operation, and should only be set at start-up.')

    def set_value(self, name, value):
        descriptor = self._get_descriptor(name)
        self._check_writable(descriptor)
        value = descriptor.validator.validate(descriptor.name, value)
        self.set(self.DEFAULT_SECTION, descriptor.name, self._to_string(value))
        return value

    @staticmethod
    def _to_string(value):
        if isinstance(value, bool):
            return 'true' if value else 'false'
        return str(value)

    def get_values(self):
        """Returns every property with its typed value, ordered by name."""
        return {name: self.get_value(name) for name in self.get_all_property_names()}

    def load_file(self, filepath):
        """Reads property values from the [qshell] section of an ini file.

        Values are checked the way ``set_value()`` checks them: unknown
        names and bad values are rejected and read-only values are accepted only while
        the registry is still in start-up mode. Nothing is changed unless
        the whole section is valid.
        """
        loaded = ConfigParser(interpolation=None)
        with open(filepath, 'r', errors='ignore') as fp:
            loaded.read_file(fp)
        if not loaded.has_section(self.DEFAULT_SECTION):
            return self

        pending = []
        for option, raw in loaded.items(self.DEFAULT_SECTION, raw=True):
            descriptor = self._get_descriptor(option)
            self._check_writable(descriptor)
            pending.append((descriptor, descriptor.validator.validate(descriptor.name, raw)))
        for descriptor, value in pending:
            self.set(self.DEFAULT_SECTION, descriptor.name, self._to_string(value))
        return self

    def save_file(self, filepath):
        """Writes the current values as an ini file that ``load_file()``
        accepts. The file is replaced in one step, a failed write leaves
        the previous file in place."""
        saved = ConfigParser(interpolation=None)
        saved.read_dict({self.DEFAULT_SECTION: {
            name: self._to_string(value) for name, value in self.get_values().items()
        }})
        tmp_path = f'{filepath}.tmp'
        with open(tmp_path, 'w') as fp:
            saved.write(fp)
        os.replace(tmp_path, filepath)
        return filepath
