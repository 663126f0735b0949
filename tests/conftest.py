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

"""Shared pytest fixtures for the compiler and renderer tests."""

from pathlib import Path

import pytest

from fwdecl.compiler import FamilyRegistry, RuleCompiler
from fwdecl.core import RuleDeclaration
from fwdecl.platforms.iptables import CompilerDriver_ipt

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
EXPECTED_OUTPUT_DIR = Path(__file__).parent / 'expected-output'

EXPECTED_FILE_NAMES = {4: 'rules.v4', 6: 'rules.v6'}


def discover_test_cases(platform: str) -> list[str]:
    """Return the fixture names that have an expected output directory."""
    platform_dir = EXPECTED_OUTPUT_DIR / platform
    if not platform_dir.exists():
        return []
    return [
        d.name
        for d in sorted(platform_dir.iterdir())
        if d.is_dir() and (FIXTURES_DIR / f'{d.name}.yml').exists()
    ]


@pytest.fixture()
def registry():
    """A fresh registry collecting dispatched RuleOptions per family."""
    return FamilyRegistry()


@pytest.fixture()
def compiler(registry):
    return RuleCompiler(registry)


@pytest.fixture()
def declare():
    """Return a helper building a RuleDeclaration with a default title."""

    def _inner(title: str = '100 test rule', **kwargs) -> RuleDeclaration:
        return RuleDeclaration(title=title, **kwargs)

    return _inner


@pytest.fixture()
def compile_ipt():
    """Return a helper that compiles a YAML fixture with the iptables driver."""

    def _inner(fixture_path: Path) -> tuple[CompilerDriver_ipt, dict]:
        driver = CompilerDriver_ipt()
        output = driver.run(driver.load(fixture_path))
        return driver, output

    return _inner
