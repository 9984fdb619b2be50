# -*- coding: utf-8 -*-
"""
Turns rendered diff fragments into Genshi streams.
"""
from genshi.core import Stream
from genshi.input import ET
import html5lib


def parse_html(html, wrapper_element='div', wrapper_class='diff'):
    """Parse an HTML fragment into a Genshi stream.

    html5lib repairs whatever nesting the diff left broken, so the stream
    is always well formed.
    """
    builder = html5lib.getTreeBuilder('etree')
    parser = html5lib.HTMLParser(tree=builder, namespaceHTMLElements=False)
    tree = parser.parseFragment(html)
    tree.tag = wrapper_element
    if wrapper_class is not None:
        tree.set('class', wrapper_class)
    return Stream(list(ET(tree)))
