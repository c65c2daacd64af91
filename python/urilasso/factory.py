import re

from urilasso import constants
from urilasso import operators
from urilasso import token
from urilasso.constants import Syntax
from urilasso.exceptions import TemplateSyntaxError
from urilasso.variable import Variable

# Leading characters which start a variable rather than an operator
VARIABLE_START = re.compile(r'[A-Za-z@%:]')


class TokenFactory(object):
    """
    Creates the tokens of a template for one of the supported dialects.
    Factories hold no state other than their syntax.
    """

    @classmethod
    def get_instance(cls, syntax=Syntax.DEFAULT):
        """
        :raise TemplateSyntaxError: if the syntax is unknown

        :param str  syntax: One of constants.Syntax
        :rtype: TokenFactory
        """
        try:
            return _FACTORIES[syntax]
        except KeyError:
            raise TemplateSyntaxError('Unknown syntax: {!r}'.format(syntax), syntax)

    def __init__(self, syntax=Syntax.DEFAULT):
        """
        :param str  syntax: One of constants.Syntax
        """
        if syntax not in Syntax.ALL:
            raise TemplateSyntaxError('Unknown syntax: {!r}'.format(syntax), syntax)
        self._syntax = syntax

    def __repr__(self):
        return 'TokenFactory({!r})'.format(self._syntax)

    @property
    def syntax(self):
        """
        :rtype: str
        """
        return self._syntax

    def new_token(self, expression):
        """
        Creates a token from a literal run of text or a single expression
        between curly brackets.

        :raise TemplateSyntaxError: if the expression is invalid
        :param str  expression:
        :return: The token or None if the expression is empty
        :rtype: token.Token
        """
        if not expression:
            return None
        if expression[0] == '{' and expression[-1] == '}':
            inner = token.strip(expression)
            try:
                return self._parse_expression(inner, expression)
            except TemplateSyntaxError as e:
                if e.expression == expression:
                    raise
                raise TemplateSyntaxError(
                    'Invalid expression {!r}: {}'.format(expression, e), expression
                )
        if '{' in expression or '}' in expression:
            raise TemplateSyntaxError(
                'Unbalanced curly brackets in: {!r}'.format(expression), expression
            )
        if expression == constants.WILDCARD:
            return token.WildcardToken()
        return token.LiteralToken(expression)

    def _parse_expression(self, inner, expression):
        if not inner:
            raise TemplateSyntaxError('Empty expression', expression)
        if self._syntax == Syntax.DRAFT3:
            return self._parse_draft3(inner, expression)

        if not VARIABLE_START.match(inner):
            operator, names = inner[0], inner[1:]
            return token.OperatorToken(self._syntax, operator, token.to_variables(names),
                                       expression=expression)
        if ',' in inner:
            # Only draft X accepts a bare list of variables
            return token.OperatorToken(self._syntax, '', token.to_variables(inner),
                                       expression=expression)
        return token.VariableToken(Variable.parse(inner), expression=expression)

    def _parse_draft3(self, inner, expression):
        if not inner.startswith('-'):
            return token.VariableToken(Variable.parse(inner), expression=expression)
        parts = inner[1:].split('|', 2)
        if len(parts) < 3:
            # Make sure an unknown operator is reported as such
            operators.get_operator(self._syntax, parts[0])
            raise TemplateSyntaxError(
                'Missing argument or variables for operator: {!r}'.format(expression),
                expression
            )
        name, argument, names = parts
        return token.OperatorToken(self._syntax, name, token.to_variables(names),
                                   argument=argument, expression=expression)


_FACTORIES = {syntax: TokenFactory(syntax) for syntax in Syntax.ALL}
