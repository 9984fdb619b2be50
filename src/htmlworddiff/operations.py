# -*- coding: utf-8 -*-
"""
Turns matching blocks into a gapless list of edit operations.
"""
from collections import namedtuple

from .config import EQUAL, INSERT, DELETE, REPLACE, NONE
from .matcher import Match


class Operation(namedtuple('Operation',
                           'action start_in_old end_in_old start_in_new end_in_new')):
    """
    One edit step covering ``old[start_in_old:end_in_old]`` and
    ``new[start_in_new:end_in_new]``.  Laid out like a difflib opcode.
    """
    __slots__ = ()


def _gap_action(starts_at_old, starts_at_new):
    if not starts_at_old and not starts_at_new:
        return REPLACE
    if starts_at_old and not starts_at_new:
        return INSERT
    if not starts_at_old:
        return DELETE
    # the first tokens are the same in both versions
    return NONE


def build_operations(matches, old_len, new_len):
    """
    Build the operations for `matches` as returned by
    `find_matching_blocks`.  The result covers ``[0, old_len)`` and
    ``[0, new_len)`` end to end.

    >>> for op in build_operations([Match(0, 0, 1)], 1, 2):
    ...     print(tuple(op))
    ('equal', 0, 1, 0, 1)
    ('insert', 1, 1, 1, 2)
    """
    pos_old = 0
    pos_new = 0
    operations = []

    for match in list(matches) + [Match(old_len, new_len, 0)]:
        action = _gap_action(pos_old == match.start_in_old,
                             pos_new == match.start_in_new)
        if action != NONE:
            operations.append(Operation(action, pos_old, match.start_in_old,
                                        pos_new, match.start_in_new))
        if match.size:
            operations.append(Operation(EQUAL,
                                        match.start_in_old, match.end_in_old,
                                        match.start_in_new, match.end_in_new))
        pos_old = match.end_in_old
        pos_new = match.end_in_new

    return operations


def contains_changes(operations):
    """True if any operation is not an `equal` one."""
    return any(op.action != EQUAL for op in operations)
