import pytest

from urilasso.constants import Status, Syntax
from urilasso.parameters import URIParameters
from urilasso.pattern import URIPattern
from urilasso.resolver import URIResolver
from urilasso.template import URITemplate


@pytest.fixture(scope='module')
def params():
    parameters = URIParameters()
    parameters.set('var', 'value')
    parameters.set('hello', 'Hello World!')
    parameters.set('empty', '')
    parameters.set('list', ['val1', 'val2', 'val3'])
    parameters.set('keys', ['key1', 'val1', 'key2', 'val2'])
    parameters.set('path', '/foo/bar')
    parameters.set('x', '1024')
    parameters.set('y', '768')
    return parameters


def expand(expression, parameters):
    return URITemplate(expression, syntax=Syntax.DRAFTX).expand(parameters)


@pytest.mark.parametrize('expression, expected', (
    ('{var}', 'value'),
    ('{hello}', 'Hello%20World%21'),
    ('{path}/here', '%2Ffoo%2Fbar/here'),
    ('{x,y}', '1024,768'),
    ('{x,undef,y}', '1024,768'),
    ('{var=default}', 'value'),
    ('{undef=default}', 'default'),
))
def test_expand_simple(params, expression, expected):
    assert expand(expression, params) == expected


@pytest.mark.parametrize('expression, expected', (
    ('{+var}', 'value'),
    ('{+hello}', 'Hello%20World!'),
    ('{+path}/here', '/foo/bar/here'),
    ('{+path,x}/here', '/foo/bar,1024/here'),
    ('{+path}{x}/here', '/foo/bar1024/here'),
    ('{+empty}/here', '/here'),
))
def test_expand_reserved(params, expression, expected):
    assert expand(expression, params) == expected


@pytest.mark.parametrize('expression, expected', (
    ('{;x,y}', ';x=1024;y=768'),
    ('{;x,y,empty}', ';x=1024;y=768;empty'),
    ('{;x,y,undef}', ';x=1024;y=768'),
    ('{;%keys}', ';key1=val1;key2=val2'),
))
def test_expand_path_parameters(params, expression, expected):
    assert expand(expression, params) == expected


@pytest.mark.parametrize('expression, expected', (
    ('{?x,y}', '?x=1024&y=768'),
    ('{?x,y,empty}', '?x=1024&y=768&empty='),
    ('{?x,y,undef}', '?x=1024&y=768'),
    ('{?list}', '?list=val1,val2,val3'),
    ('{?%keys}', '?key1=val1&key2=val2'),
    ('{?@list}', '?list=val1&list2=val2&list3=val3'),
))
def test_expand_query_parameters(params, expression, expected):
    assert expand(expression, params) == expected


@pytest.mark.parametrize('expression, expected', (
    ('{/var}', '/value'),
    ('{/list}', '/val1/val2/val3'),
    ('{/list,x}', '/val1/val2/val3/1024'),
    ('{/undef}', ''),
))
def test_expand_path_segments(params, expression, expected):
    assert expand(expression, params) == expected


@pytest.mark.parametrize('expression, expected', (
    ('{var=default}', 'value'),
    ('{undef=default}', 'default'),
    ('x{empty}y', 'xy'),
    ('x{empty=_}y', 'xy'),
    ('x{undef}y', 'xy'),
    ('x{undef=_}y', 'x_y'),
    ('x{?@name=none}', 'x?name=Fred&name2=Wilma&name3=Pebbles'),
    ('x{?@undef}', 'x'),
    ('x{?@empty}', 'x?empty='),
    ('x{?%favs=none}', 'x?color=red&volume=high'),
    ('x{?%undef}', 'x'),
))
def test_expand_default_values(expression, expected):
    parameters = URIParameters.from_mapping({
        'var': 'value',
        'empty': '',
        'name': ['Fred', 'Wilma', 'Pebbles'],
        'favs': {'color': 'red', 'volume': 'high'},
    })
    assert expand(expression, parameters) == expected


def test_resolve_variable_list():
    pattern = URIPattern('/size/{x,y}', syntax=Syntax.DRAFTX)
    result = URIResolver('/size/1024,768').resolve(pattern)
    assert result.status == Status.RESOLVED
    assert result.to_dict() == {'x': '1024', 'y': '768'}


def test_resolve_query_parameters():
    pattern = URIPattern('/search{?q,@tag,%rest}', syntax=Syntax.DRAFTX)
    uri = '/search?tag=a&q=uri%20template&tag2=b&page=2'
    assert pattern.match(uri)
    result = URIResolver(uri).resolve(pattern)
    assert result.status == Status.RESOLVED
    assert result.get('q') == 'uri template'
    assert result.get('tag') == ['a', 'b']
    assert result.get('rest') == {'page': '2'}


def test_resolve_path_segments():
    pattern = URIPattern('/files{/@dirs,name}', syntax=Syntax.DRAFTX)
    result = URIResolver('/files/a/b/c/doc.xml').resolve(pattern)
    assert result.get('dirs') == ['a', 'b', 'c']
    assert result.get('name') == 'doc.xml'


@pytest.mark.parametrize('template, parameters', (
    ('{var}', {'var': 'value'}),
    ('/{x,y}', {'x': '1024', 'y': '768'}),
    ('/map{;x,y}', {'x': '1024', 'y': '768'}),
    ('/search{?x,y}', {'x': '1024', 'y': '768'}),
    ('/search{?@list}', {'list': ['val1', 'val2', 'val3']}),
    ('{/var}', {'var': 'value'}),
    ('/path/{+path}', {'path': 'dir/sub dir/doc+1.xml'}),
))
def test_expand_then_resolve(template, parameters):
    pattern = URIPattern(template, syntax=Syntax.DRAFTX)
    uri = pattern.template.expand(parameters)
    result = URIResolver(uri).resolve(pattern)
    assert result.status == Status.RESOLVED
    assert result.to_dict() == parameters
