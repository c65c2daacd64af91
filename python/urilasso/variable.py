from urilasso import constants
from urilasso.exceptions import TemplateSyntaxError


class Variable(object):
    """
    A named placeholder in a URI template.

    The type is only a tag used to look up a resolver when matching, it does
    not take part in equality.
    """

    @classmethod
    def parse(cls, expression):
        """
        Parses a variable expression, eg, "x", "x=default", "t:x", "@t:x=y".

        :raise TemplateSyntaxError: if the name is missing or invalid
        :param str  expression:
        :rtype: Variable
        """
        if expression is None:
            raise TypeError('Cannot parse a variable from None')
        match = constants.PATTERN_VARIABLE.match(expression)
        if match is None or not match.group('name'):
            raise TemplateSyntaxError(
                'Missing variable name in expression: {!r}'.format(expression),
                expression
            )
        form = constants.Form.MARKERS.get(match.group('form'), constants.Form.SCALAR)
        return cls(match.group('name'),
                   default=match.group('default'),
                   type=match.group('type') or None,
                   form=form)

    @staticmethod
    def is_valid_name(name):
        """
        A valid name starts with a letter followed by letters, digits, '-',
        '_' or '.'

        :param str  name:
        :rtype: bool
        """
        return bool(name) and constants.PATTERN_NAME.match(name) is not None

    def __init__(self, name, default=None, type=None, form=constants.Form.SCALAR):
        """
        :param str  name:
        :param str  default:
        :param str  type:
        :param str  form:   One of constants.Form
        """
        if name is None:
            raise TypeError('Variable name cannot be None')
        if not self.is_valid_name(name):
            raise TemplateSyntaxError('Invalid variable name: {!r}'.format(name), name)
        self._name = name
        self._default = default or ''
        self._type = type
        self._form = form

    def __repr__(self):
        return 'Variable({self._name!r}, default={self._default!r}, type={self._type!r}, ' \
               'form={self._form!r})'.format(self=self)

    def __str__(self):
        marker = {v: k for k, v in constants.Form.MARKERS.items()}.get(self._form, '')
        prefix = '{}:'.format(self._type) if self._type else ''
        suffix = '={}'.format(self._default) if self._default else ''
        return marker + prefix + self._name + suffix

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return (self._name, self._default) == (other._name, other._default)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((self._name, self._default))

    @property
    def default(self):
        """
        :rtype: str
        """
        return self._default

    @property
    def form(self):
        """
        :rtype: str
        """
        return self._form

    @property
    def name(self):
        """
        :rtype: str
        """
        return self._name

    @property
    def type(self):
        """
        :rtype: str
        """
        return self._type

    def value(self, parameters):
        """
        The first non-empty value bound to this variable. The default is only
        used when no value is bound at all, a variable explicitly set to an
        empty string stays empty.

        :param urilasso.parameters.URIParameters parameters:
        :rtype: str
        """
        values = parameters.values(self._name) if parameters is not None else []
        if not values:
            return self._default
        for value in values:
            if value:
                return value
        return ''

    def values(self, parameters):
        """
        All the values bound to this variable, or the default as a single
        value if none of them is non-empty.

        :param urilasso.parameters.URIParameters parameters:
        :rtype: list[str]
        """
        values = parameters.values(self._name) if parameters is not None else []
        if any(values):
            return values
        return [self._default] if self._default else []
