import pytest

from urilasso import token
from urilasso.constants import Syntax
from urilasso.exceptions import TemplateSyntaxError
from urilasso.factory import TokenFactory
from urilasso.parameters import URIParameters
from urilasso.template import URITemplate, digest
from urilasso.variable import Variable


def test_new_none():
    with pytest.raises(TypeError):
        URITemplate(None)


def test_new_empty():
    template = URITemplate('')
    assert template.tokens == ()
    assert template.expand() == ''


def test_equals(equals_contract):
    equals_contract(URITemplate('http://acme.com/{X}'),
                    URITemplate('http://acme.com/{X}'),
                    URITemplate('http://acme.com/{Y}'))


def test_default_syntax():
    assert URITemplate('/home').syntax == Syntax.CUSTOM
    assert URITemplate('/home', syntax=Syntax.DRAFT3).syntax == Syntax.DRAFT3


@pytest.mark.parametrize('expression, expected', (
    ('/home', [token.LiteralToken('/home')]),
    ('/group/{groupid}/home', [token.LiteralToken('/group/'),
                               token.VariableToken('groupid'),
                               token.LiteralToken('/home')]),
    ('{x}{y}', [token.VariableToken('x'), token.VariableToken('y')]),
    ('http://acme.com/*', [token.LiteralToken('http://acme.com/'), token.WildcardToken()]),
    ('/a*b*', [token.LiteralToken('/a'), token.WildcardToken(),
               token.LiteralToken('b'), token.WildcardToken()]),
))
def test_digest(expression, expected):
    assert digest(expression, TokenFactory.get_instance()) == expected
    assert list(URITemplate(expression).tokens) == expected


@pytest.mark.parametrize('expression, offending', (
    ('/group/{groupid', '{groupid'),
    ('/{a{b}', '{a{b}'),
    ('/a}/b', '/a}'),
    ('/{}', '{}'),
    ('/{#x}', '{#x}'),
))
def test_syntax_error(expression, offending):
    with pytest.raises(TemplateSyntaxError) as excinfo:
        URITemplate(expression)
    assert excinfo.value.expression == offending


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        URITemplate('{')


def test_variables():
    template = URITemplate('/{x}/{t:y}{;x,z}')
    assert template.variables == (Variable('x'), Variable('y'), Variable('z'))
    assert template.variables[1].type == 't'
    assert URITemplate('/home').variables == ()


@pytest.mark.parametrize('expression, parameters, expected', (
    ('{var}', {'var': 'value'}, 'value'),
    ('{+path}/here', {'path': '/foo/bar'}, '/foo/bar/here'),
    ('{;x,y}', {'x': '1024', 'y': '768'}, ';x=1024;y=768'),
    ('{?list}', {'list': ['val1', 'val2', 'val3']}, '?list=val1,val2,val3'),
    ('/group/{groupid}/home', {'groupid': '1892'}, '/group/1892/home'),
    ('/tag/{tag}', {'tag': 'Café'}, '/tag/Caf%C3%A9'),
    ('/document/*', {}, '/document/*'),
    ('/group/{groupid=default}', None, '/group/default'),
    ('/group/{groupid}', None, '/group/'),
))
def test_expand(expression, parameters, expected):
    assert URITemplate(expression).expand(parameters) == expected


def test_expand_parameters():
    parameters = URIParameters()
    parameters.set('x', '1024')
    parameters.add('y', 768)
    assert URITemplate('/map{;x,y}').expand(parameters) == '/map;x=1024;y=768'


def test_expand_string():
    assert URITemplate.expand_string('/group/{groupid}/home', {'groupid': '1892'}) \
        == '/group/1892/home'
    assert URITemplate.expand_string('{-prefix|/|path}', {'path': ['a', 'b']},
                                     syntax=Syntax.DRAFT3) == '/a/b'


def test_str():
    assert str(URITemplate('/group/{groupid}/home')) == '/group/{groupid}/home'
