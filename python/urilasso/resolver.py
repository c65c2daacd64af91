import logging
from collections import OrderedDict

from urilasso.constants import MatchRule, Status

log = logging.getLogger(__name__)


class ResolvedVariables(object):
    """
    Result of resolving a URI against a pattern: the value of each variable
    and whether the resolution succeeded.
    """

    def __init__(self, status=Status.RESOLVED):
        """
        :param str  status: Initial status, one of constants.Status
        """
        self._status = status
        self._values = OrderedDict()
        self._statuses = OrderedDict()

    def __repr__(self):
        return 'ResolvedVariables({!r}, {!r})'.format(self._status, dict(self._values))

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)

    @property
    def names(self):
        """
        :rtype: list[str]
        """
        return list(self._values)

    @property
    def status(self):
        """
        :rtype: str
        """
        return self._status

    def get(self, name, default=None):
        """
        :param str  name:
        :param      default: Returned if the variable was not resolved
        :return: The resolved value of the variable
        """
        return self._values.get(name, default)

    def status_of(self, name):
        """
        :param str  name:
        :return: The status of the variable or None if it was not matched
        :rtype: str
        """
        return self._statuses.get(name)

    def to_dict(self):
        """
        :rtype: dict[str, object]
        """
        return dict(self._values)

    def set(self, name, value, status=Status.RESOLVED):
        """
        Records the value of a variable. Any status other than RESOLVED also
        becomes the overall status.

        :param str  name:
        :param      value:
        :param str  status: One of constants.Status
        """
        self._values[name] = value
        self._statuses[name] = status
        if status != Status.RESOLVED:
            self._status = status


class URIResolver(object):
    """
    Finds which of a list of patterns matches a URI and resolves the values
    of the pattern's variables from it, eg,

        >>> resolver = URIResolver('/group/1892/home')
        >>> pattern = resolver.find([URIPattern('/group/{groupid}/home')])
        >>> resolver.resolve(pattern).get('groupid')
        '1892'
    """

    def __init__(self, uri):
        """
        :param str  uri:
        """
        if uri is None:
            raise TypeError('Cannot resolve a None URI')
        self._uri = uri

    def __repr__(self):
        return 'URIResolver({!r})'.format(self._uri)

    @property
    def uri(self):
        """
        :rtype: str
        """
        return self._uri

    def find(self, patterns, rule=MatchRule.BEST_MATCH):
        """
        Finds the pattern matching the URI.

        With the FIRST_MATCH rule, the first matching pattern is returned.
        With the BEST_MATCH rule, the matching pattern with the most literal
        characters is returned, the earliest one winning any tie.

        :param list[URIPattern] patterns:
        :param str              rule:       One of constants.MatchRule
        :rtype: URIPattern|None
        """
        if rule not in (MatchRule.FIRST_MATCH, MatchRule.BEST_MATCH):
            raise ValueError('Unknown match rule: {!r}'.format(rule))
        best = None
        best_score = -1
        for pattern in patterns:
            if not pattern.match(self._uri):
                continue
            if rule == MatchRule.FIRST_MATCH:
                log.debug('First match for %r: %s', self._uri, pattern)
                return pattern
            score = pattern.score
            # Strictly greater keeps the earliest pattern on a tie
            if score > best_score:
                best, best_score = pattern, score
        if best is not None:
            log.debug('Best match for %r: %s (score %d)', self._uri, best, best_score)
        return best

    def find_all(self, patterns):
        """
        :param list[URIPattern] patterns:
        :return: All the patterns matching the URI in their original order
        :rtype: list[URIPattern]
        """
        return [pattern for pattern in patterns if pattern.match(self._uri)]

    def resolve(self, pattern, binder=None):
        """
        Resolves the values of the pattern's variables from the URI.

        Values are decoded, then converted by the resolver bound to the
        variable's name, or else its type, in the binder. Unbound variables
        keep the decoded string. A value refused by its resolver is kept as
        the decoded string and marks the result as REJECTED.

        :param URIPattern                       pattern:
        :param urilasso.binder.VariableBinder   binder:
        :rtype: ResolvedVariables
        """
        if pattern is None:
            raise TypeError('Cannot resolve against a None pattern')
        groups = pattern.groups(self._uri)
        if groups is None:
            return ResolvedVariables(Status.NOT_MATCHED)

        result = ResolvedVariables()
        for tok, captured in groups:
            if not tok.matchable:
                continue
            values = OrderedDict()
            tok.resolve(captured, values)
            types = {variable.name: variable.type for variable in tok.variables}
            for name, value in values.items():
                resolver = binder.get_resolver(name, types.get(name)) if binder is not None else None
                if resolver is None:
                    result.set(name, value)
                else:
                    self._apply(result, name, value, resolver)
        return result

    def _apply(self, result, name, value, resolver):
        """ Resolves a value, or each value of a list or mapping """
        if isinstance(value, list):
            resolved = [_resolve_one(resolver, v) for v in value]
            accepted = all(ok for ok, _ in resolved)
            converted = [v for _, v in resolved]
        elif isinstance(value, dict):
            resolved = {k: _resolve_one(resolver, v) for k, v in value.items()}
            accepted = all(ok for ok, _ in resolved.values())
            converted = {k: v for k, (_, v) in resolved.items()}
        else:
            accepted, converted = _resolve_one(resolver, value)

        if accepted:
            result.set(name, converted)
        else:
            log.debug('Value for %r rejected by %r: %r', name, resolver, value)
            result.set(name, value, Status.REJECTED)


def _resolve_one(resolver, value):
    """
    :return: Whether the value was accepted, and the resolved value
    :rtype: tuple[bool, object]
    """
    # Empty values are not validated
    if not value:
        return True, value
    if not resolver.exists(value):
        return False, value
    return True, resolver.resolve(value)
