import pytest
from genshi.core import Markup

from htmlworddiff.config import DiffConfig
from htmlworddiff.operations import Operation
from htmlworddiff.renderer import render, wrap_text, wrap_tokens
from htmlworddiff.utils import (
    is_tag, is_special_opening_tag, is_special_closing_tag, extract_consecutive
)


def _wrap(tag, css_class, tokens, config=None):
    out = []
    wrap_tokens(out, tag, css_class, tokens, config)
    return u''.join(out)


def test_is_tag():
    assert is_tag(u'<p>')
    assert is_tag(u'</p>')
    assert is_tag(u' <br/> ')
    assert not is_tag(u'p')
    assert not is_tag(u'<>')
    assert not is_tag(u'<b foo')
    assert not is_tag(u' ')


@pytest.mark.parametrize('token', [
    u'<b>', u'<b class="x">', u'<strong>', u'<i\n>', u'<s>', u'<sub>',
    u'<sup>', u'<strike>', u'<big>', u'<small>', u'<u>',
])
def test_special_opening_tags(token):
    assert is_special_opening_tag(token)


@pytest.mark.parametrize('token', [
    u'<br>', u'<blockquote>', u'<span>', u'<img src="a">', u'<B>', u'<p><b>',
    u'<b', u'</b>',
])
def test_not_special_opening_tags(token):
    assert not is_special_opening_tag(token)


def test_special_closing_tags():
    assert is_special_closing_tag(u'</b>')
    assert is_special_closing_tag(u'</strike>')
    assert not is_special_closing_tag(u'</B>')
    assert not is_special_closing_tag(u'</p>')
    assert not is_special_closing_tag(u'</b >')


def test_custom_inline_tag_set():
    assert is_special_opening_tag(u'<em>', tags=('em',))
    assert not is_special_opening_tag(u'<b>', tags=('em',))
    assert is_special_closing_tag(u'</em>', tags=('em',))


def test_extract_consecutive():
    tokens = [u'a', u' ', u'<p>', u'b']
    assert extract_consecutive(tokens, lambda t: not is_tag(t)) == [u'a', u' ']
    assert tokens == [u'<p>', u'b']
    assert extract_consecutive(tokens, lambda t: False) == []
    assert tokens == [u'<p>', u'b']


def test_wrap_text():
    assert wrap_text(u'x', 'ins', 'diffins') == u'<ins class="diffins">x</ins>'
    assert wrap_text(u'x', 'del', 'diffdel', u"'") == u"<del class='diffdel'>x</del>"


def test_wrap_plain_text():
    assert _wrap('ins', 'diffins', [u'foo', u' ', u'bar']) == \
        u'<ins class="diffins">foo bar</ins>'


def test_tags_stay_outside_wrapper():
    assert _wrap('ins', 'diffins', [u'<p>', u'c', u'</p>']) == \
        u'<p><ins class="diffins">c</ins></p>'
    assert _wrap('del', 'diffdel', [u'a', u'</p>', u'<p>', u'b']) == \
        u'<del class="diffdel">a</del></p><p><del class="diffdel">b</del>'


def test_inline_opening_tag_on_insert():
    assert _wrap('ins', 'diffins', [u'<b>', u'x', u'</b>']) == \
        u"<b><ins class='mod'><ins class=\"diffins\">x</ins></b>"


def test_inline_opening_tag_dropped_on_delete():
    assert _wrap('del', 'diffdel', [u'<b>', u'x', u'</b>']) == \
        u"<ins class='mod'><del class=\"diffdel\">x</del></b>"


def test_inline_closing_tag_on_insert():
    assert _wrap('ins', 'diffins', [u'</b>', u' ', u'y']) == \
        u'</ins></b><ins class="diffins"> y</ins>'


def test_inline_closing_tag_dropped_on_delete():
    assert _wrap('del', 'diffdel', [u'</b>']) == u'</ins>'


def test_non_inline_tag_only():
    assert _wrap('ins', 'diffins', [u'<br>']) == u'<br>'
    assert _wrap('del', 'diffdel', [u'<p>', u'</p>']) == u'<p></p>'


def test_wrap_does_not_modify_tokens():
    tokens = [u'<b>', u'x']
    _wrap('del', 'diffdel', tokens)
    assert tokens == [u'<b>', u'x']


def test_wrap_empty():
    assert _wrap('ins', 'diffins', []) == u''


def test_render_operations():
    old = [u'a', u' ', u'b']
    new = [u'a', u' ', u'c']
    ops = [Operation('equal', 0, 2, 0, 2), Operation('replace', 2, 3, 2, 3)]
    rv = render(ops, old, new)
    assert isinstance(rv, Markup)
    assert rv == u'a <del class="diffmod">b</del><ins class="diffmod">c</ins>'


def test_render_insert_and_delete_classes():
    old = [u'x']
    new = [u'y']
    assert render([Operation('delete', 0, 1, 0, 0)], old, new) == \
        u'<del class="diffdel">x</del>'
    assert render([Operation('insert', 0, 0, 0, 1)], old, new) == \
        u'<ins class="diffins">y</ins>'


def test_render_with_config():
    cfg = DiffConfig()
    cfg.replace_class = 'changed'
    cfg.class_quote = u"'"
    cfg.delete_first = False
    rv = render([Operation('replace', 0, 1, 0, 1)], [u'x'], [u'y'], cfg)
    assert rv == u"<ins class='changed'>y</ins><del class='changed'>x</del>"


def test_render_unknown_action():
    with pytest.raises(ValueError):
        render([Operation('none', 0, 0, 0, 0)], [], [])
