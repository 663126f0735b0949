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

"""Unit tests for RuleFile ordering and rendering."""

import dataclasses

import pytest

from fwdecl.compiler import BaseCompiler, RuleOptions
from fwdecl.core import Family
from fwdecl.core.options import RENDER_DEFAULTS
from fwdecl.platforms.iptables import RenderError, RuleFile, order_key


def _rule_lines(text):
    return [line for line in text.splitlines() if line.startswith('-A ')]


def test_order_key():
    assert order_key(None, 500) == (0, 500, '')
    assert order_key('010', 500) == (0, 10, '')
    assert order_key('abc', 500) == (1, 0, 'abc')
    assert sorted([order_key('x', 0), order_key(900, 0), order_key(5, 0)]) == [
        (0, 5, ''),
        (0, 900, ''),
        (1, 0, 'x'),
    ]


def test_empty_rule_file_renders_header_only():
    assert RuleFile(Family.V6).render() == '# Generated by fwdecl for ip6tables\n'


def test_rules_are_sorted_by_order_then_title():
    rule_file = RuleFile(Family.V4)
    rule_file.emit('b', RuleOptions(family=Family.V4, order=20))
    rule_file.emit('z', RuleOptions(family=Family.V4))
    rule_file.emit('a', RuleOptions(family=Family.V4, order='20'))
    rule_file.emit('c', RuleOptions(family=Family.V4, order=10))
    assert len(rule_file) == 4

    lines = _rule_lines(rule_file.render())
    titles = [line.split('"')[1] for line in lines]
    assert titles == ['c', 'a', 'b', 'z']


def test_custom_chains_are_declared():
    rule_file = RuleFile(Family.V4)
    rule_file.emit('a', RuleOptions(family=Family.V4, chain='LOGDROP'))
    text = rule_file.render()
    assert ':INPUT ACCEPT [0:0]\n' in text
    assert ':LOGDROP - [0:0]\n' in text


def test_tables_are_rendered_in_fixed_order():
    rule_file = RuleFile(Family.V4)
    rule_file.emit('m', RuleOptions(family=Family.V4, table='mangle', chain='PREROUTING'))
    rule_file.emit('f', RuleOptions(family=Family.V4))
    text = rule_file.render()
    assert text.index('*filter') < text.index('*mangle')
    assert text.count('COMMIT') == 2


def test_render_error_without_compiler_propagates():
    rule_file = RuleFile(Family.V4)
    rule_file.emit('bad', RuleOptions(family=Family.V4, protocol='bogus'))
    with pytest.raises(RenderError):
        rule_file.render()


def test_render_error_is_reported_and_rule_skipped():
    compiler = BaseCompiler()
    rule_file = RuleFile(Family.V6)
    rule_file.emit('bad', RuleOptions(family=Family.V6, protocol='bogus'))
    rule_file.emit('good', RuleOptions(family=Family.V6, protocol='tcp'))
    lines = _rule_lines(rule_file.render(compiler))
    assert len(lines) == 1
    assert '"good"' in lines[0]
    assert compiler.get_errors()[0].startswith('Rule bad: IPv6: unknown protocol')


def test_multi_line_title_stays_in_its_comment():
    rule_file = RuleFile(Family.V4)
    rule_file.emit(
        '100 x\n-A INPUT -j ACCEPT',
        RuleOptions(family=Family.V4, action='drop'),
    )
    text = rule_file.render()
    assert '# 100 x -A INPUT -j ACCEPT\n' in text
    assert _rule_lines(text) == [
        '-A INPUT -m comment --comment "100 x -A INPUT -j ACCEPT" -j DROP'
    ]


def test_datadir_template_is_used(tmp_path):
    template_dir = tmp_path / 'templates' / 'iptables'
    template_dir.mkdir(parents=True)
    (template_dir / 'ruleset.j2').write_text('{{ command }}\n')
    defaults = dataclasses.replace(RENDER_DEFAULTS, datadir=str(tmp_path))
    assert RuleFile(Family.V6, defaults).render() == 'ip6tables\n'
