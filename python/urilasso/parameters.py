from collections import OrderedDict


class URIParameters(object):
    """
    Ordered mapping of parameter names to one or more string values.

    A name set to an empty list is considered absent, whereas a name set to
    an empty string is present but empty.
    """

    @classmethod
    def from_mapping(cls, mapping):
        """
        :param dict mapping: Names mapped to a string or a list of strings
        :rtype: URIParameters
        """
        parameters = cls()
        for name, value in mapping.items():
            parameters.set(name, value)
        return parameters

    def __init__(self):
        self._values = OrderedDict()

    def __repr__(self):
        return 'URIParameters({!r})'.format(dict(self._values))

    def __contains__(self, name):
        return name in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def add(self, name, value):
        """
        Appends a value to the values of the given name

        :param str  name:
        :param str  value:
        """
        self._values.setdefault(name, []).append(str(value))

    def exists(self, name):
        """
        Whether at least one value is bound to the name

        :param str  name:
        :rtype: bool
        """
        return bool(self._values.get(name))

    def get(self, name):
        """
        :param str  name:
        :return: The first value for the name or None
        :rtype: str
        """
        values = self._values.get(name)
        return values[0] if values else None

    def names(self):
        """
        :rtype: list[str]
        """
        return list(self._values)

    def set(self, name, value):
        """
        Replaces the values of the given name. A mapping is flattened to
        alternating keys and values.

        :param str                  name:
        :param str|list[str]|dict   value:
        """
        if name is None:
            raise TypeError('Parameter name cannot be None')
        if value is None:
            values = []
        elif isinstance(value, str):
            values = [value]
        elif isinstance(value, dict):
            values = [str(v) for pair in value.items() for v in pair]
        else:
            values = [str(v) for v in value]
        self._values[name] = values

    def values(self, name):
        """
        :param str  name:
        :rtype: list[str]
        """
        return list(self._values.get(name, ()))


def to_parameters(parameters):
    """
    Converts a plain mapping to URIParameters, leaving None and existing
    URIParameters unchanged.

    :param URIParameters|dict|None parameters:
    :rtype: URIParameters|None
    """
    if parameters is None or isinstance(parameters, URIParameters):
        return parameters
    return URIParameters.from_mapping(parameters)
