"""
Operator tables for each template dialect.

Every operator defines how its variables expand, the regex used to match
the expanded text (without capturing groups, the token adds its own), and
how the matched text resolves back into variable values.

Draft 3 operators use the form '{-name|argument|vars}', the other dialects
use a single prefix character, eg, '{;x,y}'.
"""
import re

from urilasso import coder
from urilasso import constants
from urilasso.constants import Form, Syntax
from urilasso.exceptions import TemplateSyntaxError

V = constants.VALUE_CHAR


class Operator(object):
    def __init__(self, name, expand, regex, resolve, argument=False, single=False):
        """
        :param str      name:       Operator name or prefix character
        :param callable expand:     (token, parameters) -> str
        :param callable regex:      (token) -> str
        :param callable resolve:    (token, captured, values) -> None
        :param bool     argument:   Whether the operator requires an argument
        :param bool     single:     Whether the operator takes a single variable
        """
        self.name = name
        self.expand = expand
        self.regex = regex
        self.resolve = resolve
        self.argument = argument
        self.single = single

    def __repr__(self):
        return 'Operator({!r})'.format(self.name)

    def to_expression(self, argument, variables):
        names = ','.join(str(v) for v in variables)
        if self.argument:
            return '{-%s|%s|%s}' % (self.name, argument, names)
        return '{%s%s}' % (self.name, names)

    def validate(self, token):
        """
        :raise TemplateSyntaxError: if the token does not fit the operator
        """
        if not token.variables:
            raise TemplateSyntaxError(
                'Operator {!r} requires at least one variable'.format(self.name),
                token.expression
            )
        if self.argument and not token.argument:
            raise TemplateSyntaxError(
                'Operator {!r} requires an argument: {}'.format(self.name, token.expression),
                token.expression
            )
        if self.single and len(token.variables) > 1:
            raise TemplateSyntaxError(
                'Operator {!r} only accepts one variable: {}'.format(self.name, token.expression),
                token.expression
            )


def get_operator(syntax, name):
    """
    :raise TemplateSyntaxError: if the operator is not defined for the syntax

    :param str  syntax:
    :param str  name:
    :rtype: Operator
    """
    try:
        table = OPERATORS[syntax]
    except KeyError:
        raise TemplateSyntaxError('Unknown syntax: {!r}'.format(syntax), syntax)
    try:
        return table[name]
    except KeyError:
        raise TemplateSyntaxError(
            'Unknown operator for syntax {}: {!r}'.format(syntax, name), name
        )


def raw_values(variable, parameters):
    """
    Values explicitly bound to the variable, the default is used only if
    there are none.

    :rtype: list[str]
    """
    values = parameters.values(variable.name) if parameters is not None else []
    if not values and variable.default:
        values = [variable.default]
    return values


def _pairs(values):
    """ Alternating keys and values as a list of pairs """
    items = list(values)
    if len(items) % 2:
        items.append('')
    return list(zip(items[::2], items[1::2]))


# -----------------------------------------------------------------------------
# Draft 3

def _expand_opt(token, parameters):
    present = any(variable.value(parameters) for variable in token.variables)
    return token.argument if present else ''


def _expand_neg(token, parameters):
    present = any(variable.value(parameters) for variable in token.variables)
    return '' if present else token.argument


def _expand_prefix(token, parameters):
    values = token.variables[0].values(parameters)
    return ''.join(token.argument + coder.encode(value) for value in values)


def _expand_suffix(token, parameters):
    values = token.variables[0].values(parameters)
    return ''.join(coder.encode(value) + token.argument for value in values)


def _expand_join(token, parameters):
    parts = []
    for variable in token.variables:
        if raw_values(variable, parameters):
            parts.append(variable.name + '=' + coder.encode(variable.value(parameters)))
    return token.argument.join(parts)


def _expand_list(token, parameters):
    values = token.variables[0].values(parameters)
    return token.argument.join(coder.encode(value) for value in values)


def _regex_optional(token):
    return '(?:{})?'.format(re.escape(token.argument))


def _separated_value(separator):
    """ Value characters up to, but excluding, the next separator """
    return '(?:(?!{}){})*'.format(re.escape(separator), V)


def _regex_prefix(token):
    return '(?:{}{})*'.format(re.escape(token.argument), _separated_value(token.argument))


def _regex_suffix(token):
    return '(?:{}{})*'.format(_separated_value(token.argument), re.escape(token.argument))


def _regex_join(token):
    pair = '(?:{})={}'.format('|'.join(re.escape(v.name) for v in token.variables),
                               _separated_value(token.argument))
    return '(?:{pair}(?:{sep}{pair})*)?'.format(pair=pair, sep=re.escape(token.argument))


def _regex_list(token):
    value = _separated_value(token.argument)
    return '{v}(?:{sep}{v})*'.format(v=value, sep=re.escape(token.argument))


def _resolve_nothing(token, captured, values):
    # Only the presence of the variables is known, not their value
    pass


def _resolve_prefix(token, captured, values):
    parts = captured.split(token.argument)[1:]
    values[token.variables[0].name] = [coder.decode(part) for part in parts]


def _resolve_suffix(token, captured, values):
    parts = captured.split(token.argument)[:-1]
    values[token.variables[0].name] = [coder.decode(part) for part in parts]


def _resolve_join(token, captured, values):
    names = {variable.name for variable in token.variables}
    for pair in captured.split(token.argument):
        name, _, value = pair.partition('=')
        if name in names:
            values[name] = coder.decode(value)


def _resolve_list(token, captured, values):
    values[token.variables[0].name] = [coder.decode(part)
                                       for part in captured.split(token.argument)]


# -----------------------------------------------------------------------------
# Prefix operators, shared by the draft X and custom dialects

def _expand_simple(token, parameters, encode=coder.encode):
    values = (variable.value(parameters) for variable in token.variables)
    return ','.join(encode(value) for value in values if value)


def _expand_reserved(token, parameters):
    return _expand_simple(token, parameters, encode=coder.encode_reserved)


def _parameter_pairs(variable, parameters):
    """
    Encoded (name, value) pairs for a variable expanded as parameters. A
    list form variable repeats its name with an index, eg, 'x', 'x2', 'x3',
    while a map form variable uses its values as alternating keys and values.

    :rtype: list[tuple[str, str]]
    """
    values = raw_values(variable, parameters)
    if variable.form == Form.MAP:
        return [(coder.encode(k), coder.encode(v)) for k, v in _pairs(values)]
    if variable.form == Form.LIST:
        return [(variable.name + (str(idx + 1) if idx else ''), coder.encode(value))
                for idx, value in enumerate(values)]
    if values:
        return [(variable.name, ','.join(coder.encode(value) for value in values))]
    return []


def _expand_parameters(token, parameters, first, separator, show_empty):
    """
    :param str  first:      Character before the first pair
    :param str  separator:  Character before any subsequent pair
    :param bool show_empty: Whether an empty value still shows the '='
    """
    expanded = []
    for variable in token.variables:
        for name, value in _parameter_pairs(variable, parameters):
            expanded.append(name + '=' + value if value or show_empty else name)
    return (first + separator.join(expanded)) if expanded else ''


def _expand_path_parameters(token, parameters):
    return _expand_parameters(token, parameters, ';', ';', False)


def _expand_query_parameters(token, parameters):
    return _expand_parameters(token, parameters, '?', '&', True)


def _expand_path_segments(token, parameters):
    segments = []
    for variable in token.variables:
        values = raw_values(variable, parameters)
        if any(values):
            segments.extend(values)
    return ''.join('/' + coder.encode(segment) for segment in segments)


def _regex_simple(token):
    return '{v}+(?:,{v}+)*'.format(v=V)


def _regex_reserved(token):
    return '{}+'.format(constants.RESERVED_VALUE)


def _name_regex(variable):
    if variable.form == Form.MAP:
        return '{}+'.format(V)
    if variable.form == Form.LIST:
        return re.escape(variable.name) + r'\d*'
    return re.escape(variable.name)


def _regex_parameters(token, first, separator):
    names = '|'.join(_name_regex(variable) for variable in token.variables)
    pair = '(?:{})(?:=(?:{}|,)*)?'.format(names, V)
    return '(?:{first}{pair}(?:{sep}{pair})*)?'.format(
        first=re.escape(first), pair=pair, sep=re.escape(separator)
    )


def _regex_path_parameters(token):
    return _regex_parameters(token, ';', ';')


def _regex_query_parameters(token):
    return _regex_parameters(token, '?', '&')


def _regex_path_segments(token):
    return '(?:/{}*)*'.format(V)


def _assign_in_order(token, parts, values, decode=coder.decode):
    """
    Assigns each part to the variables in order. A list form variable takes
    as many parts as possible, and the last variable takes any remainder.
    """
    remaining = list(parts)
    variables = token.variables
    for idx, variable in enumerate(variables):
        if not remaining:
            break
        following = len(variables) - idx - 1
        if variable.form == Form.LIST:
            count = max(len(remaining) - following, 1)
            values[variable.name] = [decode(part) for part in remaining[:count]]
            remaining = remaining[count:]
        elif following == 0 and len(remaining) > 1:
            values[variable.name] = [decode(part) for part in remaining]
            remaining = []
        else:
            values[variable.name] = decode(remaining.pop(0))


def _resolve_simple(token, captured, values):
    _assign_in_order(token, captured.split(','), values)


def _resolve_reserved(token, captured, values):
    # Extra commas belong to the earlier values
    parts = captured.rsplit(',', len(token.variables) - 1)
    _assign_in_order(token, parts, values, decode=coder.decode_reserved)


def _resolve_parameters(token, captured, values, separator):
    pairs = []
    for segment in captured[1:].split(separator):
        name, _, value = segment.partition('=')
        pairs.append((name, coder.decode(value)))

    scalars = {v.name for v in token.variables if v.form == Form.SCALAR}
    lists = [v for v in token.variables if v.form == Form.LIST]
    maps = [v for v in token.variables if v.form == Form.MAP]
    unclaimed = []
    for name, value in pairs:
        if name in scalars:
            values[name] = value
            continue
        for variable in lists:
            if re.match(re.escape(variable.name) + r'\d*\Z', name):
                values.setdefault(variable.name, []).append(value)
                break
        else:
            unclaimed.append((coder.decode(name), value))
    if maps and unclaimed:
        values[maps[0].name] = dict(unclaimed)


def _resolve_path_parameters(token, captured, values):
    _resolve_parameters(token, captured, values, ';')


def _resolve_query_parameters(token, captured, values):
    _resolve_parameters(token, captured, values, '&')


def _resolve_path_segments(token, captured, values):
    _assign_in_order(token, captured.split('/')[1:], values)


# -----------------------------------------------------------------------------

_PREFIX_OPERATORS = (
    Operator('+', _expand_reserved, _regex_reserved, _resolve_reserved),
    Operator(';', _expand_path_parameters, _regex_path_parameters, _resolve_path_parameters),
    Operator('?', _expand_query_parameters, _regex_query_parameters, _resolve_query_parameters),
    Operator('/', _expand_path_segments, _regex_path_segments, _resolve_path_segments),
)

OPERATORS = {
    Syntax.DRAFT3: {op.name: op for op in (
        Operator('opt', _expand_opt, _regex_optional, _resolve_nothing, argument=True),
        Operator('neg', _expand_neg, _regex_optional, _resolve_nothing, argument=True),
        Operator('prefix', _expand_prefix, _regex_prefix, _resolve_prefix,
                 argument=True, single=True),
        Operator('suffix', _expand_suffix, _regex_suffix, _resolve_suffix,
                 argument=True, single=True),
        Operator('join', _expand_join, _regex_join, _resolve_join, argument=True),
        Operator('list', _expand_list, _regex_list, _resolve_list,
                 argument=True, single=True),
    )},
    Syntax.DRAFTX: {op.name: op for op in _PREFIX_OPERATORS + (
        Operator('', _expand_simple, _regex_simple, _resolve_simple),
    )},
    Syntax.CUSTOM: {op.name: op for op in _PREFIX_OPERATORS},
}
