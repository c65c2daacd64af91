import re

from urilasso import constants
from urilasso.template import URITemplate


class URIPattern(object):
    """
    A URI template used to match URIs.

    The regex is built lazily from the regex of each token in order, with a
    capturing group for every token holding variables. A URI only matches if
    the whole of it matches the pattern.
    """

    def __init__(self, template, syntax=constants.Syntax.DEFAULT):
        """
        :raise TemplateSyntaxError: if given a malformed template string

        :param URITemplate|str  template:
        :param str              syntax:     Syntax used for a template string
        """
        if template is None:
            raise TypeError('Cannot create a pattern from None')
        if not isinstance(template, URITemplate):
            template = URITemplate(template, syntax=syntax)
        self._template = template

        self._regex = None          # type: str
        self._compiled = None       # type: re.Pattern
        self._group_indexes = None  # type: tuple[int]

    def __repr__(self):
        return 'URIPattern({!r})'.format(self._template.expression)

    def __str__(self):
        return self._template.expression

    def __eq__(self, other):
        if not isinstance(other, URIPattern):
            return False
        return self._template == other._template

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._template)

    @property
    def regex(self):
        """
        Regex pattern used to match against URIs

        :rtype: str
        """
        if self._regex is None:
            self._compile()
        return self._regex

    @property
    def score(self):
        """
        Specificity of the pattern, ie, the number of literal characters.

        :rtype: int
        """
        return sum(tok.specificity for tok in self._template.tokens)

    @property
    def template(self):
        """
        :rtype: URITemplate
        """
        return self._template

    @property
    def tokens(self):
        """
        :rtype: tuple[urilasso.token.Token]
        """
        return self._template.tokens

    def match(self, uri):
        """
        Whether the URI matches this pattern entirely

        :param str  uri:
        :rtype: bool
        """
        return self.groups(uri) is not None

    def groups(self, uri):
        """
        The captured part of the URI for each token, or None if the URI does
        not match. Literal tokens map to their own text.

        :param str  uri:
        :rtype: list[tuple[urilasso.token.Token, str]]|None
        """
        if uri is None:
            return None
        if self._compiled is None:
            self._compile()
        match = self._compiled.match(uri)
        if match is None:
            return None
        return [(tok, match.group(idx) if idx else tok.expression)
                for tok, idx in zip(self._template.tokens, self._group_indexes)]

    def _compile(self):
        """ Builds the full regex and the group index of each token """
        segments = []
        indexes = []
        group = 1
        for tok in self._template.tokens:
            if tok.matchable:
                segments.append(tok.regex)
                indexes.append(group if tok.groups else 0)
                group += tok.groups
            else:
                # Tokens which cannot be matched accept anything
                segments.append('(?:.*?)')
                indexes.append(0)
        self._regex = ''.join(segments)
        self._group_indexes = tuple(indexes)
        self._compiled = re.compile('(?:' + self._regex + r')\Z', re.DOTALL)
