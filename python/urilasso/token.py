import re

from urilasso import coder
from urilasso import constants
from urilasso import operators
from urilasso.exceptions import TemplateSyntaxError
from urilasso.variable import Variable


class Token(object):
    """
    A single part of a URI template, either literal text or an expression
    between curly brackets.

    Two tokens are equal if they are the same kind of token and were created
    from the same expression.
    """
    # Whether the token can take part in matching a URI
    matchable = False

    def __init__(self, expression):
        """
        :param str  expression: Source expression of the token
        """
        if expression is None:
            raise TypeError('Cannot create a token from None')
        self._expression = expression

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self._expression)

    def __str__(self):
        return self._expression

    def __eq__(self, other):
        if other is None or type(other) is not type(self):
            return False
        return self._key() == other._key()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__class__.__name__, ) + self._key())

    @property
    def expression(self):
        """
        :rtype: str
        """
        return self._expression

    @property
    def groups(self):
        """
        Number of capturing groups in the token's regex

        :rtype: int
        """
        return 0

    @property
    def regex(self):
        """
        :rtype: str
        """
        raise NotImplementedError

    @property
    def specificity(self):
        """
        Number of fixed characters the token contributes to a match

        :rtype: int
        """
        return 0

    @property
    def variables(self):
        """
        :rtype: tuple[Variable]
        """
        return ()

    def expand(self, parameters):
        """
        :param urilasso.parameters.URIParameters parameters:
        :rtype: str
        """
        raise NotImplementedError

    def match(self, part):
        """
        Whether the whole string matches this token

        :param str  part:
        :rtype: bool
        """
        if not self.matchable or part is None:
            return False
        return re.match('(?:' + self.regex + r')\Z', part, re.DOTALL) is not None

    def resolve(self, captured, values):
        """
        Decodes the captured part of a URI and adds the values of each of the
        token's variables to the values mapping.

        :param str              captured:
        :param dict[str, object] values:
        :return: True if the token could be resolved
        :rtype: bool
        """
        return True

    def _key(self):
        return (self._expression, )


class LiteralToken(Token):
    """ Literal text, expands to itself and only matches identical text """
    matchable = True

    def __init__(self, text):
        super(LiteralToken, self).__init__(text)

    @property
    def regex(self):
        return re.escape(self._expression)

    @property
    def specificity(self):
        return len(self._expression)

    @property
    def text(self):
        """
        :rtype: str
        """
        return self._expression

    def expand(self, parameters):
        return self._expression


class WildcardToken(LiteralToken):
    """
    The '*' wildcard. Expands to itself but matches any sequence of
    characters, which is resolved under the name '*'.
    """

    def __init__(self, text=constants.WILDCARD):
        if text != constants.WILDCARD:
            raise TemplateSyntaxError('Invalid wildcard: {!r}'.format(text), text)
        super(WildcardToken, self).__init__(text)

    @property
    def groups(self):
        return 1

    @property
    def regex(self):
        return '({}*)'.format(constants.ANY_CHAR)

    @property
    def specificity(self):
        return 0

    def resolve(self, captured, values):
        values[constants.WILDCARD] = coder.decode_reserved(captured or '')
        return True


class VariableToken(Token):
    """ A single variable, eg '{x}', expanded as a percent-encoded value """
    matchable = True

    def __init__(self, variable, expression=None):
        """
        :param Variable|str variable:
        :param str          expression: Source expression, generated if None
        """
        if variable is None:
            raise TypeError('Cannot create a variable token from None')
        if not isinstance(variable, Variable):
            variable = Variable.parse(variable)
        self._variable = variable
        super(VariableToken, self).__init__(expression or '{%s}' % variable)

    @property
    def groups(self):
        return 1

    @property
    def regex(self):
        return '({}+)'.format(constants.VALUE_CHAR)

    @property
    def variable(self):
        """
        :rtype: Variable
        """
        return self._variable

    @property
    def variables(self):
        return (self._variable, )

    def expand(self, parameters):
        return coder.encode(self._variable.value(parameters))

    def resolve(self, captured, values):
        if captured:
            values[self._variable.name] = coder.decode(captured)
        return True


class OperatorToken(Token):
    """
    An operator expression combining one or more variables, eg '{;x,y}' or
    '{-join|&|x,y}'.

    The behaviour of every operator is defined by the operator tables of the
    dialect the token was parsed with, so this is the only token class
    needed for all of them.
    """
    matchable = True

    def __init__(self, syntax, operator, variables, argument=None, expression=None):
        """
        :raise TemplateSyntaxError: if the operator is unknown to the dialect,
            or the argument or variables are missing

        :param str              syntax:     One of constants.Syntax
        :param str              operator:   Operator name or prefix character
        :param list[Variable]   variables:
        :param str              argument:   Operator argument, eg, separator
        :param str              expression: Source expression, generated if None
        """
        if variables is None or isinstance(variables, Variable):
            variables = (variables, )
        if any(variable is None for variable in variables):
            raise TypeError('Cannot create an operator token with a None variable')
        self._syntax = syntax
        self._operator = operators.get_operator(syntax, operator)
        self._argument = argument
        self._variables = tuple(variables)
        if expression is None:
            expression = self._operator.to_expression(argument, self._variables)
        super(OperatorToken, self).__init__(expression)
        self._operator.validate(self)

    def __repr__(self):
        return 'OperatorToken({!r}, {!r})'.format(self._syntax, self._expression)

    @property
    def argument(self):
        """
        :rtype: str
        """
        return self._argument

    @property
    def groups(self):
        return 1

    @property
    def operator(self):
        """
        :rtype: str
        """
        return self._operator.name

    @property
    def regex(self):
        return '({})'.format(self._operator.regex(self))

    @property
    def syntax(self):
        """
        :rtype: str
        """
        return self._syntax

    @property
    def variables(self):
        return self._variables

    def expand(self, parameters):
        return self._operator.expand(self, parameters)

    def resolve(self, captured, values):
        if captured:
            self._operator.resolve(self, captured, values)
        return True

    def _key(self):
        return (self._syntax, self._expression)


def strip(expression):
    """
    Removes the curly brackets around an expression, if any

    :param str  expression:
    :rtype: str
    """
    if len(expression) >= 2 and expression[0] == '{' and expression[-1] == '}':
        return expression[1:-1]
    return expression


def to_variables(expression):
    """
    :raise TemplateSyntaxError: if any variable is invalid

    :param str  expression: Comma separated list of variable expressions
    :rtype: list[Variable]
    """
    return [Variable.parse(part) for part in expression.split(',')]
