# -*- coding: utf-8 -*-
"""
    htmlworddiff
    ~~~~~~~~~~~~

    Word level diffs of HTML fragments.  Inserted text is wrapped in
    ``<ins>``, deleted text in ``<del>``, and the markup around it is kept.
    Nice to show what changed between two revisions of a document.
    Examples:

    >>> from htmlworddiff import HtmlDiff, render_html_diff

    >>> print(render_html_diff('Foo baz', 'Foo blah baz'))
    <div class="diff">Foo <ins class="diffins">blah </ins>baz</div>

    >>> print(render_html_diff('Foo bar baz', 'Foo baz', wrapper_element=None))
    Foo <del class="diffdel">bar </del>baz

    >>> print(render_html_diff('<b>hello</b>', '<b>hello world</b>', wrapper_element=None))
    <b>hello<ins class="diffins"> world</ins></b>

    >>> diff = HtmlDiff('a b c', 'a b c')
    >>> diff.compute_diff()
    False
    >>> print(diff.build_diff_page())
    a b c

    :copyright: (c) 2026 by the htmlworddiff authors.
    :license: BSD, see LICENSE for more details.
"""
from .config import DiffConfig
from .tokenizer import tokenize
from .matcher import Match, index_tokens, find_matching_blocks
from .operations import Operation, build_operations
from .renderer import render
from .differ import (
    HtmlDiff, DiffStateError, has_changes, render_html_diff,
    diff_genshi_stream
)

__all__ = [
    'HtmlDiff',
    'DiffStateError',
    'DiffConfig',
    'render_html_diff',
    'diff_genshi_stream',
    'has_changes',
    'tokenize',
    'index_tokens',
    'find_matching_blocks',
    'build_operations',
    'render',
    'Match',
    'Operation',
]
