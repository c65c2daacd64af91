class VariableResolver(object):
    """
    Validates and converts the matched value of a variable.

    Implementations must ensure resolve(value) does not return None whenever
    exists(value) is True.
    """

    def exists(self, value):
        """
        :param str  value:
        :rtype: bool
        """
        raise NotImplementedError

    def resolve(self, value):
        """
        :param str  value:
        :return: The object bound to the value, or None if it cannot be resolved
        """
        raise NotImplementedError


class VariableResolverMap(VariableResolver):
    """ Resolves values to the objects they are mapped to """

    def __init__(self, mapping=None):
        """
        :param dict[str, object] mapping:
        """
        self._mapping = dict(mapping or {})

    def __repr__(self):
        return 'VariableResolverMap({!r})'.format(self._mapping)

    def exists(self, value):
        return value is not None and value in self._mapping

    def resolve(self, value):
        return self._mapping.get(value)


class VariableResolverList(VariableResolver):
    """ Only accepts values from a fixed list, resolving them to themselves """

    def __init__(self, values=None):
        """
        :param list[str] values:
        """
        self._values = list(values or ())

    def __repr__(self):
        return 'VariableResolverList({!r})'.format(self._values)

    @property
    def values(self):
        """
        :rtype: list[str]
        """
        return self._values[:]

    def exists(self, value):
        return value in self._values

    def resolve(self, value):
        return value if self.exists(value) else None


class VariableBinder(object):
    """
    Binds resolvers to variables, either by the variable's name or by its
    type. A name binding takes precedence over a type binding.
    """

    def __init__(self):
        self._names = {}
        self._types = {}

    def __repr__(self):
        return 'VariableBinder(names={!r}, types={!r})'.format(self._names, self._types)

    @property
    def names(self):
        """
        :rtype: list[str]
        """
        return list(self._names)

    @property
    def types(self):
        """
        :rtype: list[str]
        """
        return list(self._types)

    def bind_name(self, name, resolver):
        """
        :param str              name:
        :param VariableResolver resolver:
        """
        if name is None or resolver is None:
            raise TypeError('Cannot bind None: {!r} -> {!r}'.format(name, resolver))
        self._names[name] = resolver

    def bind_type(self, type_name, resolver):
        """
        :param str              type_name:
        :param VariableResolver resolver:
        """
        if type_name is None or resolver is None:
            raise TypeError('Cannot bind None: {!r} -> {!r}'.format(type_name, resolver))
        self._types[type_name] = resolver

    def get_resolver(self, name, type_name=None):
        """
        :param str  name:
        :param str  type_name:
        :return: The resolver bound to the name, else to the type, or None
        :rtype: VariableResolver
        """
        resolver = self._names.get(name)
        if resolver is None and type_name is not None:
            resolver = self._types.get(type_name)
        return resolver

    def is_bound(self, name, type_name=None):
        """
        :param str  name:
        :param str  type_name:
        :rtype: bool
        """
        return self.get_resolver(name, type_name) is not None
