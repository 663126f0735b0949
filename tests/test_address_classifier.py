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

"""Unit tests for the address classifier."""

import pytest

from fwdecl.compiler import AddressClassification, classify_addresses, split_tokens, token_family
from fwdecl.core import Family


class TestSplitTokens:
    @pytest.mark.parametrize('value', [None, '', [], ()])
    def test_unset(self, value):
        assert split_tokens(value) == []

    def test_comma_separated_string(self):
        assert split_tokens('10.0.0.1, 2001:db8::1 ,,') == ['10.0.0.1', '2001:db8::1']

    def test_list_with_embedded_commas(self):
        assert split_tokens(['10.0.0.1,10.0.0.2', '', '2001:db8::1']) == [
            '10.0.0.1',
            '10.0.0.2',
            '2001:db8::1',
        ]


class TestTokenFamily:
    @pytest.mark.parametrize(
        'token',
        ['10.0.0.1', '10.0.0.0/8', '10.0.0.1/24', '10.0.0.1-10.0.0.9', '0.0.0.0/0'],
    )
    def test_ipv4(self, token):
        assert token_family(token) is Family.V4

    @pytest.mark.parametrize(
        'token',
        ['2001:db8::1', '2001:db8::/32', '::/0', '::1', '2001:db8::1-2001:db8::ff'],
    )
    def test_ipv6(self, token):
        assert token_family(token) is Family.V6

    @pytest.mark.parametrize(
        'token',
        [
            'not-an-ip',
            'example.com',
            '10.0.0.256',
            '10.0.0.0/33',
            '10.0.0.1-2001:db8::1',
            '10.0.0.1-',
            '2001:db8::/129',
        ],
    )
    def test_invalid(self, token):
        assert token_family(token) is None


class TestClassifyAddresses:
    def test_unset_field_yields_empty_buckets(self):
        assert classify_addresses(None) == AddressClassification()

    def test_every_token_lands_in_one_bucket(self):
        cls = classify_addresses('10.0.0.1, bogus, 2001:db8::1, 10.0.0.0/8, ::1, nope')
        assert cls.v4 == ('10.0.0.1', '10.0.0.0/8')
        assert cls.v6 == ('2001:db8::1', '::1')
        assert cls.other == ('bogus', 'nope')
        assert len(cls.v4 + cls.v6 + cls.other) == 6

    def test_order_is_preserved(self):
        cls = classify_addresses(['10.0.0.3', '10.0.0.1', '10.0.0.2'])
        assert cls.v4 == ('10.0.0.3', '10.0.0.1', '10.0.0.2')

    def test_classification_is_repeatable(self):
        value = ['2001:db8::2', 'x', '10.1.1.1', '2001:db8::1']
        assert classify_addresses(value) == classify_addresses(value)

    def test_for_family(self):
        cls = classify_addresses('10.0.0.1,2001:db8::1')
        assert cls.for_family(Family.V4) == ('10.0.0.1',)
        assert cls.for_family(Family.V6) == ('2001:db8::1',)
