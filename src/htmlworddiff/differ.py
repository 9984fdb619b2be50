# -*- coding: utf-8 -*-
"""
The `HtmlDiff` class and the one-call helpers built on it.
"""
import logging

from genshi.core import Markup

from .config import DiffConfig
from .tokenizer import tokenize
from .matcher import index_tokens, find_matching_blocks
from .operations import build_operations, contains_changes
from .renderer import render

log = logging.getLogger(__name__)


class DiffStateError(RuntimeError):
    """Raised when a diff is rendered before it was computed."""


class HtmlDiff(object):
    """Word level diff of two HTML fragments.

    The markup is not parsed; it is split into words, whitespace and tags
    (see `htmlworddiff.tokenizer`) and those are diffed.  Each instance
    owns all of its state, so separate instances can be used from
    separate threads.

    >>> diff = HtmlDiff(u'<p>Foo bar</p>', u'<p>Foo baz</p>')
    >>> diff.compute_diff()
    True
    >>> print(diff.build_diff_page())
    <p>Foo <del class="diffmod">bar</del><ins class="diffmod">baz</ins></p>
    """

    def __init__(self, old_text, new_text, config=None):
        for name, value in (('old_text', old_text), ('new_text', new_text)):
            if not isinstance(value, str):
                raise TypeError('%s must be a string, got %s'
                                % (name, type(value).__name__))
        self.old_text = old_text
        self.new_text = new_text
        self.config = config or DiffConfig()
        self._old_tokens = None
        self._new_tokens = None
        self._matches = None
        self._operations = None

    @property
    def old_tokens(self):
        return self._old_tokens

    @property
    def new_tokens(self):
        return self._new_tokens

    @property
    def operations(self):
        """The computed operations, or `None` before `compute_diff`."""
        if self._operations is None:
            return None
        return list(self._operations)

    def matching_blocks(self):
        """The matching blocks found by `compute_diff`."""
        self._require_computed()
        return list(self._matches)

    def compute_diff(self):
        """
        Tokenize both texts and compute the edit operations.  Returns
        `True` if the texts differ.
        """
        self._old_tokens = tokenize(self.old_text)
        self._new_tokens = tokenize(self.new_text)
        index = index_tokens(self._new_tokens)

        self._matches = find_matching_blocks(self._old_tokens, self._new_tokens,
                                             index)
        self._operations = build_operations(self._matches, len(self._old_tokens),
                                            len(self._new_tokens))
        changed = contains_changes(self._operations)
        log.debug('diffed %d old and %d new tokens: %d matching blocks, '
                  '%d operations, changed=%s', len(self._old_tokens),
                  len(self._new_tokens), len(self._matches), len(self._operations),
                  changed)
        return changed

    def build_diff_page(self):
        """Render the computed diff as an HTML fragment."""
        self._require_computed()
        return render(self._operations, self._old_tokens, self._new_tokens,
                      self.config)

    def _require_computed(self):
        if self._operations is None:
            raise DiffStateError('Call compute_diff() before build_diff_page()')


def has_changes(old, new):
    """True if `old` and `new` tokenize differently."""
    return HtmlDiff(old, new).compute_diff()


def render_html_diff(old, new, wrapper_element='div', wrapper_class='diff',
                     config=None):
    """Renders the diff between two HTML fragments."""
    differ = HtmlDiff(old, new, config=config)
    differ.compute_diff()
    rv = differ.build_diff_page()
    if wrapper_element is None:
        return rv
    if wrapper_class is None:
        return Markup(u'<%s>%s</%s>' % (wrapper_element, rv, wrapper_element))
    return Markup(u'<%s class="%s">%s</%s>'
                  % (wrapper_element, wrapper_class, rv, wrapper_element))


def diff_genshi_stream(old, new, config=None):
    """Renders the diff of two HTML fragments as a Genshi stream."""
    from .parser import parse_html
    rv = render_html_diff(old, new, wrapper_element=None, config=config)
    return parse_html(rv)
