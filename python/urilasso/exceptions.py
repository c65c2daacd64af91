class URILassoError(Exception):
    """ Generic base exception for all urilasso errors """


class TemplateSyntaxError(URILassoError, ValueError):
    """ Malformed template, variable or operator expression """

    def __init__(self, message, expression=None):
        super(TemplateSyntaxError, self).__init__(message)
        self.expression = expression


class ConfigError(URILassoError):
    """ Any errors raised from reading a pattern configuration """


class MissingPatternError(ConfigError, KeyError):
    """ Error with a missing pattern name """
