import re

ENV_VAR = 'URILASSO_CONFIG'

KEY_PATTERNS = 'patterns'
KEY_SYNTAX = 'syntax'
KEY_CHOICES = 'choices'

WILDCARD = '*'

# RFC 3986 character classes
UNRESERVED = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~'
GEN_DELIMS = ':/?#[]@'
SUB_DELIMS = "!$&'()*+,;="
RESERVED = GEN_DELIMS + SUB_DELIMS

# Regex fragments used when matching expanded values
PCT_ENCODED = '%[0-9A-Fa-f]{2}'
VALUE_CHAR = r'(?:[A-Za-z0-9\-._~]|' + PCT_ENCODED + ')'
RESERVED_VALUE = r'\S'
ANY_CHAR = '.'

PATTERN_LITERAL = re.compile('[^{}]+')
PATTERN_WILDCARD_SPLIT = re.compile(r'(\*)')
PATTERN_NAME = re.compile(r'^[A-Za-z][A-Za-z0-9\-_.]*\Z')
PATTERN_VARIABLE = re.compile(
    r'^(?P<form>[@%])?(?:(?P<type>[^:=]*):)?(?P<name>[^=]*)(?:=(?P<default>.*))?\Z',
    re.DOTALL
)


class Syntax(object):
    """ Template dialects understood by the token factory """
    DRAFT3 = 'draft3'
    DRAFTX = 'draftx'
    CUSTOM = 'custom'

    ALL = (DRAFT3, DRAFTX, CUSTOM)
    DEFAULT = CUSTOM


class Form(object):
    """ Arity of the values a variable expects """
    SCALAR = 'scalar'
    LIST = 'list'
    MAP = 'map'

    MARKERS = {'@': LIST, '%': MAP}


class MatchRule(object):
    FIRST_MATCH = 'first'
    BEST_MATCH = 'best'


class Status(object):
    RESOLVED = 'resolved'
    NOT_MATCHED = 'not-matched'
    REJECTED = 'rejected'
