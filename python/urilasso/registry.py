import logging
import os
from collections import OrderedDict

import yaml

from urilasso import constants
from urilasso import exceptions
from urilasso.binder import VariableBinder, VariableResolverList
from urilasso.pattern import URIPattern
from urilasso.resolver import URIResolver

log = logging.getLogger(__name__)


class PatternRegistry(object):
    """
    A named set of URI patterns loaded from a configuration, eg,

        syntax: custom
        patterns:
            home: /home
            document: /document/{+path}
        choices:
            section: [user, group]

    Choices restrict the values a variable resolves to.
    """

    @classmethod
    def from_environment(cls):
        """
        Reads the environment variable for a file to load the configuration from

        :raise ConfigError: if the environment variable is not set or set to
            a non-existent file
        :rtype: PatternRegistry
        """
        path = os.getenv(constants.ENV_VAR)
        if not path or not os.path.exists(path):
            raise exceptions.ConfigError(
                'Invalid environment path for pattern configuration: '
                '{}={}'.format(constants.ENV_VAR, path)
            )
        return cls.from_file(path)

    @classmethod
    def from_file(cls, filepath):
        """
        :raise ConfigError: if the file cannot be read as YAML

        :param str  filepath:
        :rtype: PatternRegistry
        """
        try:
            with open(filepath) as f:
                config = yaml.safe_load(f)
        except (IOError, yaml.YAMLError) as e:
            raise exceptions.ConfigError(
                'Unable to load pattern configuration {}: {}'.format(filepath, e)
            )
        return cls(config)

    def __init__(self, config):
        """
        :raise ConfigError: if the configuration is invalid
        :raise TemplateSyntaxError: if any pattern is malformed

        :param dict config:
        """
        if not isinstance(config, dict) or constants.KEY_PATTERNS not in config:
            raise exceptions.ConfigError(
                'Pattern configuration requires a {!r} mapping'.format(constants.KEY_PATTERNS)
            )
        self._syntax = config.get(constants.KEY_SYNTAX) or constants.Syntax.DEFAULT
        if self._syntax not in constants.Syntax.ALL:
            raise exceptions.ConfigError('Unknown syntax: {!r}'.format(self._syntax))

        self._patterns = OrderedDict()
        self._binder = VariableBinder()

        # Patterns sharing the same template share the compiled pattern
        compiled = {}
        for name, template in (config[constants.KEY_PATTERNS] or {}).items():
            pattern = compiled.get(template)
            if pattern is None:
                try:
                    pattern = URIPattern(template, syntax=self._syntax)
                except exceptions.TemplateSyntaxError as e:
                    raise exceptions.TemplateSyntaxError(
                        'Invalid pattern {!r}: {}'.format(name, e), e.expression
                    )
                compiled[template] = pattern
            self._patterns[name] = pattern

        for name, choices in (config.get(constants.KEY_CHOICES) or {}).items():
            if not isinstance(choices, (list, tuple)):
                raise exceptions.ConfigError(
                    'Choices for variable {!r} must be a list: {!r}'.format(name, choices)
                )
            self._binder.bind_name(name, VariableResolverList([str(c) for c in choices]))

        log.debug('Loaded %d patterns (%s syntax)', len(self._patterns), self._syntax)

    def __contains__(self, name):
        return name in self._patterns

    def __len__(self):
        return len(self._patterns)

    @property
    def binder(self):
        """
        Binder used when resolving, additional resolvers can be bound to it.

        :rtype: VariableBinder
        """
        return self._binder

    @property
    def names(self):
        """
        :rtype: list[str]
        """
        return list(self._patterns)

    @property
    def patterns(self):
        """
        :rtype: dict[str, URIPattern]
        """
        return self._patterns.copy()

    @property
    def syntax(self):
        """
        :rtype: str
        """
        return self._syntax

    def find(self, uri, rule=constants.MatchRule.BEST_MATCH):
        """
        :param str  uri:
        :param str  rule:   One of constants.MatchRule
        :return: Tuple of (name, pattern) for the pattern matching the URI,
            or None if no pattern matches
        :rtype: tuple[str, URIPattern]|None
        """
        pattern = URIResolver(uri).find(list(self._patterns.values()), rule=rule)
        if pattern is None:
            return None
        # Patterns can be shared, the first name using it is returned
        for name, candidate in self._patterns.items():
            if candidate is pattern:
                return name, pattern

    def get_pattern(self, name):
        """
        :raise MissingPatternError: if no pattern exists with the name

        :param str  name:
        :rtype: URIPattern
        """
        try:
            return self._patterns[name]
        except KeyError:
            raise exceptions.MissingPatternError('Pattern {!r} does not exist'.format(name))

    def resolve(self, uri, rule=constants.MatchRule.BEST_MATCH):
        """
        Finds the pattern matching the URI and resolves its variables using
        the registry's binder.

        :param str  uri:
        :param str  rule:   One of constants.MatchRule
        :return: Tuple of (name, resolved variables), or None if no pattern
            matches
        :rtype: tuple[str, urilasso.resolver.ResolvedVariables]|None
        """
        found = self.find(uri, rule=rule)
        if found is None:
            return None
        name, pattern = found
        return name, URIResolver(uri).resolve(pattern, self._binder)
