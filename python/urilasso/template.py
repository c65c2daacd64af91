from urilasso import constants
from urilasso.exceptions import TemplateSyntaxError
from urilasso.factory import TokenFactory
from urilasso.parameters import to_parameters


class URITemplate(object):
    """
    A URI template parsed into its ordered tokens, eg,

        >>> URITemplate('/group/{groupid}/home').expand({'groupid': '1892'})
        '/group/1892/home'
    """

    @classmethod
    def expand_string(cls, expression, parameters, syntax=constants.Syntax.DEFAULT):
        """
        Parses and expands a template in one step

        :param str                  expression:
        :param URIParameters|dict   parameters:
        :param str                  syntax:
        :rtype: str
        """
        return cls(expression, syntax=syntax).expand(parameters)

    def __init__(self, expression, syntax=constants.Syntax.DEFAULT):
        """
        :raise TemplateSyntaxError: if the template is malformed

        :param str  expression: Template string
        :param str  syntax:     One of constants.Syntax
        """
        if expression is None:
            raise TypeError('Cannot create a template from None')
        self._expression = expression
        self._syntax = syntax
        self._tokens = tuple(digest(expression, TokenFactory.get_instance(syntax)))

    def __repr__(self):
        return 'URITemplate({!r}, syntax={!r})'.format(self._expression, self._syntax)

    def __str__(self):
        return self._expression

    def __eq__(self, other):
        if not isinstance(other, URITemplate):
            return False
        return self._expression == other._expression

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._expression)

    @property
    def expression(self):
        """
        :rtype: str
        """
        return self._expression

    @property
    def syntax(self):
        """
        :rtype: str
        """
        return self._syntax

    @property
    def tokens(self):
        """
        :rtype: tuple[urilasso.token.Token]
        """
        return self._tokens

    @property
    def variables(self):
        """
        Variables of the template in the order they first appear

        :rtype: tuple[urilasso.variable.Variable]
        """
        seen = set()
        ordered = []
        for tok in self._tokens:
            for variable in tok.variables:
                if variable.name not in seen:
                    seen.add(variable.name)
                    ordered.append(variable)
        return tuple(ordered)

    def expand(self, parameters=None):
        """
        Expands the template using the given parameters. Missing variables
        expand to their default value, or nothing at all.

        :param URIParameters|dict   parameters:
        :rtype: str
        """
        parameters = to_parameters(parameters)
        return ''.join(tok.expand(parameters) for tok in self._tokens)


def digest(expression, factory):
    """
    Splits a template string into its tokens. Any run of text outside curly
    brackets is a literal, except for the '*' wildcard which is a token of
    its own.

    :raise TemplateSyntaxError: for unterminated or nested expressions
    :param str          expression:
    :param TokenFactory factory:
    :rtype: list[urilasso.token.Token]
    """
    tokens = []
    idx = 0
    while idx < len(expression):
        char = expression[idx]
        if char == '{':
            end = expression.find('}', idx)
            nested = expression.find('{', idx + 1)
            if end < 0:
                raise TemplateSyntaxError(
                    'Unterminated expression in template: {!r}'.format(expression[idx:]),
                    expression[idx:]
                )
            if 0 <= nested < end:
                raise TemplateSyntaxError(
                    'Nested expression in template: {!r}'.format(expression[idx:end + 1]),
                    expression[idx:end + 1]
                )
            tokens.append(factory.new_token(expression[idx:end + 1]))
            idx = end + 1
        elif char == '}':
            raise TemplateSyntaxError(
                'Unexpected closing bracket in template: {!r}'.format(expression),
                expression[:idx + 1]
            )
        else:
            match = constants.PATTERN_LITERAL.match(expression, idx)
            for part in constants.PATTERN_WILDCARD_SPLIT.split(match.group(0)):
                if part:
                    tokens.append(factory.new_token(part))
            idx = match.end()
    return tokens
