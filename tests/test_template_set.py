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

"""Unit tests for template lookup."""

import jinja2
import pytest

from fwdecl.driver import TemplateSet, one_line, template_search_path


def test_one_line():
    assert one_line('a\nb\r\nc') == 'a b c'
    assert one_line('plain') == 'plain'
    assert one_line(42) == '42'


def test_search_path_order(tmp_path):
    paths = template_search_path('iptables', tmp_path)
    assert paths[0] == tmp_path / 'templates' / 'iptables'
    assert paths[-1].parts[-3:] == ('resources', 'templates', 'iptables')


def test_search_path_without_datadir():
    paths = template_search_path('iptables')
    assert paths[-1].name == 'iptables'
    assert all('resources' in p.parts or 'fwdecl' in p.parts for p in paths)


def test_packaged_template_renders():
    text = TemplateSet('iptables').render('ruleset.j2', {'command': 'iptables', 'tables': []})
    assert text == '# Generated by fwdecl for iptables\n'


def test_missing_template(tmp_path):
    with pytest.raises(jinja2.TemplateNotFound):
        TemplateSet('no-such-platform', tmp_path).render('ruleset.j2', {})
