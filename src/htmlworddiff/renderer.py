# -*- coding: utf-8 -*-
"""
Renders edit operations back into markup with ``<ins>``/``<del>`` tags.
"""
from genshi.core import Markup

from .config import DiffConfig, EQUAL, INSERT, DELETE, REPLACE
from .utils import (
    is_tag, is_special_opening_tag, is_special_closing_tag,
    extract_consecutive
)


def _is_text(token):
    return not is_tag(token)


def wrap_text(text, tag, css_class, quote=u'"'):
    """Wrap `text` in a `tag` element carrying `css_class`."""
    return u'<%s class=%s%s%s>%s</%s>' % (tag, quote, css_class, quote, text, tag)


def wrap_tokens(out, tag, css_class, tokens, config=None):
    """
    Append `tokens` to `out`, enclosing the text in `tag` (``ins`` or
    ``del``).

    Tags are never put inside the wrapper: each run of text gets its own
    wrapper and the tags between runs are emitted as they are.  So with
    old ``<p>a</p>`` and new ``<p>a</p><p>c</p>`` the result is
    ``<p>a</p><p><ins class="diffins">c</ins></p>`` rather than an
    ``<ins>`` spanning two paragraphs.

    When a change starts or ends on an inline formatting tag (``<b>``,
    ``<strong>``...) an ``<ins class='mod'>`` shell is opened after the
    opening tag or closed before the closing tag.  Inside a deletion the
    formatting tag itself is dropped.

    This still doesn't guarantee valid HTML (think of diffing a text
    that already contains ins or del tags), but it handles the common
    cases.
    """
    config = config or DiffConfig()
    tags = config.inline_formatting_tags
    tokens = list(tokens)

    while tokens:
        injection = u''
        injection_before = False

        text = extract_consecutive(tokens, _is_text)
        if text:
            out.append(wrap_text(u''.join(text), tag, css_class,
                                 config.class_quote))
        elif is_special_opening_tag(tokens[0], tags):
            injection = config.special_case_opening_injection
            if tag == 'del':
                del tokens[0]
        elif is_special_closing_tag(tokens[0], tags):
            injection = config.special_case_closing_injection
            injection_before = True
            if tag == 'del':
                del tokens[0]

        if not tokens and not injection:
            break

        markup = u''.join(extract_consecutive(tokens, is_tag))
        if injection_before:
            out.append(injection + markup)
        else:
            out.append(markup + injection)


def render_operation(out, operation, old, new, config):
    action, i1, i2, j1, j2 = operation
    if action == EQUAL:
        out.append(u''.join(new[j1:j2]))
    elif action == DELETE:
        wrap_tokens(out, 'del', config.delete_class, old[i1:i2], config)
    elif action == INSERT:
        wrap_tokens(out, 'ins', config.insert_class, new[j1:j2], config)
    elif action == REPLACE:
        deleted = ('del', config.replace_class, old[i1:i2])
        inserted = ('ins', config.replace_class, new[j1:j2])
        if not config.delete_first:
            deleted, inserted = inserted, deleted
        for tag, css_class, tokens in (deleted, inserted):
            wrap_tokens(out, tag, css_class, tokens, config)
    else:
        raise ValueError('unknown diff operation %r' % (action,))


def render(operations, old, new, config=None):
    """
    Render `operations` over the `old` and `new` token lists.

    Returns a `genshi.core.Markup` so the fragment is not escaped again
    when placed into a Genshi template.
    """
    config = config or DiffConfig()
    out = []
    for operation in operations:
        render_operation(out, operation, old, new, config)
    return Markup(u''.join(out))
