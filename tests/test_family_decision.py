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

"""Unit tests for the family decision."""

import pytest

from fwdecl.compiler import (
    AllAddressesInvalidError,
    FamilyDecision,
    classify_addresses,
    decide_families,
)


def _decide(source=None, destination=None):
    return decide_families(
        '100 test rule',
        classify_addresses(source),
        classify_addresses(destination),
    )


def test_only_ipv4():
    assert _decide('10.0.0.1', '192.0.2.1') == FamilyDecision(emit_v4=True, emit_v6=False)


def test_only_ipv6():
    assert _decide(None, '2001:db8::1') == FamilyDecision(emit_v4=False, emit_v6=True)


def test_no_addresses_is_dual_stack():
    assert _decide() == FamilyDecision(emit_v4=True, emit_v6=True)


def test_both_families():
    decision = _decide('10.0.0.1', '2001:db8::1')
    assert decision.emit_v4 and decision.emit_v6
    assert decision.skipped == ()


def test_both_families_with_invalid_tokens():
    decision = _decide('10.0.0.1, bogus', '2001:db8::1')
    assert decision.emit_v4 and decision.emit_v6
    assert decision.skipped == ('bogus',)


def test_ipv4_with_invalid_tokens_is_ipv4_only():
    decision = _decide('10.0.0.1,not-an-ip')
    assert decision == FamilyDecision(emit_v4=True, emit_v6=False, skipped=('not-an-ip',))


def test_only_invalid_addresses_fail():
    with pytest.raises(AllAddressesInvalidError) as excinfo:
        _decide('not-an-ip', 'also-bad')
    assert excinfo.value.title == '100 test rule'
    assert excinfo.value.tokens == ('not-an-ip', 'also-bad')
    assert 'not-an-ip' in str(excinfo.value)
