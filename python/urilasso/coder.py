"""
Percent-encoding of variable values.

Values are normalised (NFKC) and encoded as UTF-8 before escaping, so that
equivalent unicode strings always produce the same URI. Only the unreserved
characters of RFC 3986 are left as they are, unless the reserved variant is
used which additionally preserves the reserved delimiters.
"""
import unicodedata
from urllib.parse import quote, unquote, unquote_plus

from urilasso import constants


def encode(value):
    """
    Percent-encodes every character outside the unreserved set.

    :param str  value:
    :rtype: str
    """
    return _quote(value, '')


def encode_reserved(value):
    """
    Percent-encodes a value leaving both unreserved and reserved characters
    unescaped, eg, for inserting a path.

    :param str  value:
    :rtype: str
    """
    return _quote(value, constants.RESERVED)


def decode(value):
    """
    Decodes percent-encoded UTF-8 sequences and '+' as a space. Any other
    character is returned unchanged.

    :param str  value:
    :rtype: str
    """
    if value is None:
        raise TypeError('Cannot decode None')
    return unquote_plus(value, encoding='utf-8')


def normalize(value):
    """
    :param str  value:
    :rtype: str
    """
    return unicodedata.normalize('NFKC', value)


def _quote(value, safe):
    if value is None:
        raise TypeError('Cannot encode None')
    if not value:
        return value
    # quote() always leaves the unreserved characters, including '~'
    return quote(normalize(value), safe=safe, encoding='utf-8')


def decode_reserved(value):
    """
    Decodes percent-encoded UTF-8 sequences only, a '+' is left unchanged
    as it is a reserved character which may appear unescaped.

    :param str  value:
    :rtype: str
    """
    if value is None:
        raise TypeError('Cannot decode None')
    return unquote(value, encoding='utf-8')
