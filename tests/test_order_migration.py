# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Unit tests for the priority to order migration."""

from fwdecl.core.options import RuleOption, get_canonical_key, resolve_order


def test_order_wins_over_priority():
    assert resolve_order('5', '9') == ('5', None)


def test_priority_used_when_order_unset():
    order, notice = resolve_order(None, '9')
    assert order == '9'
    assert 'priority' in notice
    assert 'order' in notice


def test_empty_order_counts_as_unset():
    order, notice = resolve_order('', 9)
    assert order == 9
    assert notice is not None


def test_both_unset_stays_unset():
    assert resolve_order(None, None) == (None, None)


def test_zero_is_a_set_order():
    assert resolve_order(0, 9) == (0, None)


def test_canonical_key():
    assert get_canonical_key('priority') == RuleOption.ORDER
    assert get_canonical_key('chain') == 'chain'
