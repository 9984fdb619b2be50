# -*- coding: utf-8 -*-
"""
Token helpers for htmlworddiff.
"""
from .config import _opening_tag_re, _closing_tag_re, INLINE_FORMATTING_TAGS


def is_tag(token):
    """True if `token` is a complete opening or closing tag."""
    return bool(_opening_tag_re.match(token) or _closing_tag_re.match(token))


def is_whitespace(char):
    return char.isspace()


def _special_case_table(tags):
    opening = tuple(u'<' + name for name in tags)
    closing = frozenset(u'</%s>' % name for name in tags)
    return opening, closing


_DEFAULT_OPENING, _DEFAULT_CLOSING = _special_case_table(INLINE_FORMATTING_TAGS)


def is_special_opening_tag(token, tags=INLINE_FORMATTING_TAGS):
    """
    Check whether `token` opens one of the inline formatting `tags`.

    The tag name must be followed by ``>`` or whitespace, so ``<b>`` and
    ``<b class="x">`` match while ``<br>`` and ``<blockquote>`` do not.
    The comparison is case-sensitive.
    """
    if tags is INLINE_FORMATTING_TAGS:
        prefixes = _DEFAULT_OPENING
    else:
        prefixes = _special_case_table(tags)[0]
    for prefix in prefixes:
        if token.startswith(prefix) and len(token) > len(prefix):
            follow = token[len(prefix)]
            if follow == u'>' or follow.isspace():
                return True
    return False


def is_special_closing_tag(token, tags=INLINE_FORMATTING_TAGS):
    """Check whether `token` is exactly the closing form of an inline tag."""
    if tags is INLINE_FORMATTING_TAGS:
        closing = _DEFAULT_CLOSING
    else:
        closing = _special_case_table(tags)[1]
    return token in closing


def extract_consecutive(tokens, condition):
    """
    Remove and return the leading run of `tokens` for which `condition`
    holds.  `tokens` is modified in place.
    """
    i = 0
    n = len(tokens)
    while i < n and condition(tokens[i]):
        i += 1
    rv = tokens[:i]
    del tokens[:i]
    return rv
