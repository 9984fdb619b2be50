# -*- coding: utf-8 -*-
"""
Configuration and constants for htmlworddiff.
"""
import re

# Tokens that are a complete tag, optionally padded with whitespace.
_opening_tag_re = re.compile(r'^\s*<[^>]+>\s*$', re.U)
_closing_tag_re = re.compile(r'^\s*</[^>]+>\s*$', re.U)

# Inline formatting tags that get the ``<ins class='mod'>`` shell when a
# change boundary falls right on them.
INLINE_FORMATTING_TAGS = (
    'strong', 'b', 'i', 'big', 'small', 'u', 'sub', 'sup', 'strike', 's',
)

# Operation kinds, named like the opcodes of difflib.
EQUAL = 'equal'
INSERT = 'insert'
DELETE = 'delete'
REPLACE = 'replace'
NONE = 'none'


class DiffConfig(object):
    """
    Runtime configuration for diff rendering.

    Override attributes on an instance to change the output::

        cfg = DiffConfig()
        cfg.insert_class = 'added'
    """

    # CSS classes for the <ins>/<del> wrappers
    insert_class = 'diffins'
    delete_class = 'diffdel'
    replace_class = 'diffmod'
    # Quote character used around the wrapper class attribute
    class_quote = '"'

    # Render the <del> half of a replace before the <ins> half
    delete_first = True

    # Inline formatting handling at change boundaries
    inline_formatting_tags = INLINE_FORMATTING_TAGS
    special_case_opening_injection = u"<ins class='mod'>"
    special_case_closing_injection = u'</ins>'
