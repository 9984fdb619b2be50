# -*- coding: utf-8 -*-
"""
Splits markup into words, whitespace runs and tags.

The tokenizer is a lossless partition of its input: joining the tokens
gives back the original string.

>>> tokenize(u'<p>Foo  bar</p>')
['<p>', 'Foo', '  ', 'bar', '</p>']
"""
from .utils import is_whitespace

IN_TEXT = 'text'
IN_TAG = 'tag'
IN_WHITESPACE = 'whitespace'


def _next_mode_after_tag(char):
    # `char` is the terminating '>', so this is always IN_TEXT.
    return IN_WHITESPACE if is_whitespace(char) else IN_TEXT


def tokenize(markup):
    """Convert `markup` into a list of word, whitespace and tag tokens."""
    mode = IN_TEXT
    current = u''
    words = []

    for char in markup:
        if mode == IN_TEXT:
            if char == u'<':
                if current:
                    words.append(current)
                current = char
                mode = IN_TAG
            elif is_whitespace(char):
                if current:
                    words.append(current)
                current = char
                mode = IN_WHITESPACE
            else:
                current += char

        elif mode == IN_TAG:
            current += char
            if char == u'>':
                words.append(current)
                current = u''
                mode = _next_mode_after_tag(char)

        else:
            if char == u'<':
                if current:
                    words.append(current)
                current = char
                mode = IN_TAG
            elif is_whitespace(char):
                current += char
            else:
                if current:
                    words.append(current)
                current = char
                mode = IN_TEXT

    if current:
        words.append(current)
    return words
