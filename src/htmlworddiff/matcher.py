# -*- coding: utf-8 -*-
"""
Matching blocks between two token sequences.

Works like `difflib.SequenceMatcher.get_matching_blocks`, but the longest
run is searched through an index of the new tokens instead of a full
comparison table, and the result has no trailing sentinel.
"""
from collections import namedtuple


class Match(namedtuple('Match', 'start_in_old start_in_new size')):
    """A run of `size` identical tokens shared by both sequences."""
    __slots__ = ()

    @property
    def end_in_old(self):
        return self.start_in_old + self.size

    @property
    def end_in_new(self):
        return self.start_in_new + self.size


def index_tokens(tokens):
    """Map every token value to the ascending list of its positions."""
    index = {}
    for i, token in enumerate(tokens):
        index.setdefault(token, []).append(i)
    return index


def find_match(old, index, start_in_old, end_in_old, start_in_new, end_in_new):
    """
    Find the longest run of tokens shared by ``old[start_in_old:end_in_old]``
    and the new sequence window ``[start_in_new, end_in_new)``.

    `index` is the result of `index_tokens` on the new sequence.  On ties
    the run that starts first in `old`, then first in new, wins.  Returns
    `None` if the windows share no token.
    """
    best_in_old = start_in_old
    best_in_new = start_in_new
    best_size = 0

    # run length of the match ending at each new position, for the
    # previous old position
    length_at = {}

    for i in range(start_in_old, end_in_old):
        new_length_at = {}
        positions = index.get(old[i])
        if positions is None:
            length_at = new_length_at
            continue

        for j in positions:
            if j < start_in_new:
                continue
            if j >= end_in_new:
                break
            k = length_at.get(j - 1, 0) + 1
            new_length_at[j] = k
            if k > best_size:
                best_in_old = i - k + 1
                best_in_new = j - k + 1
                best_size = k

        length_at = new_length_at

    if best_size == 0:
        return None
    return Match(best_in_old, best_in_new, best_size)


def _find_matching_blocks(old, index, start_in_old, end_in_old,
                          start_in_new, end_in_new, blocks):
    while True:
        match = find_match(old, index, start_in_old, end_in_old,
                           start_in_new, end_in_new)
        if match is None:
            return

        if start_in_old < match.start_in_old and \
           start_in_new < match.start_in_new:
            _find_matching_blocks(old, index, start_in_old, match.start_in_old,
                                  start_in_new, match.start_in_new, blocks)

        blocks.append(match)

        # continue with the window right of the match
        if match.end_in_old < end_in_old and match.end_in_new < end_in_new:
            start_in_old = match.end_in_old
            start_in_new = match.end_in_new
            continue
        return


def find_matching_blocks(old, new, index=None):
    """
    Return all matching blocks between `old` and `new`, ordered left to
    right.

    Each block is the longest available run within the window left over
    by the blocks found before it.  This is a greedy split, not a minimal
    edit script.

    >>> find_matching_blocks(['a', ' ', 'b'], ['a', ' ', 'c'])
    [Match(start_in_old=0, start_in_new=0, size=2)]
    """
    if index is None:
        index = index_tokens(new)
    blocks = []
    _find_matching_blocks(old, index, 0, len(old), 0, len(new), blocks)
    return blocks
