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

"""CompilerDriver_ipt: declaration catalog to iptables/ip6tables rule sets."""

from __future__ import annotations

from pathlib import Path

from fwdecl.compiler import BaseCompiler, CompileResult, FamilyRegistry, RuleCompiler
from fwdecl.core import Family, RuleDeclaration, YamlReader
from fwdecl.core.options import RENDER_DEFAULTS, RenderDefaults
from fwdecl.platforms.iptables._rule_file import RuleFile


class CompilerDriver_ipt(BaseCompiler):
    """Orchestrates loading, compiling and rendering.

    Every run gets a fresh FamilyRegistry whose emitters are
    :class:`RuleFile` objects, so rendering only ever sees the rules of
    that run.
    """

    def __init__(self, defaults: RenderDefaults = RENDER_DEFAULTS) -> None:
        super().__init__()
        self.defaults: RenderDefaults = defaults

        # Options
        self.ipv4_run: bool = True
        self.ipv6_run: bool = True
        self.single_rule: str = ''
        self.test_mode: bool = False

        # Output
        self.registry: FamilyRegistry | None = None
        self.results: list[CompileResult] = []
        self.all_errors: list[str] = []
        self.all_warnings: list[str] = []

    def _make_rule_file(self, family: Family) -> RuleFile:
        return RuleFile(family, self.defaults)

    def load(self, path: str | Path) -> list[RuleDeclaration]:
        return YamlReader().parse(path)

    def _wanted(self, family: Family) -> bool:
        return self.ipv4_run if family is Family.V4 else self.ipv6_run

    def run(self, declarations: list[RuleDeclaration]) -> dict[Family, str]:
        """Compile *declarations* and return the rendered rule set per family.

        Only families that at least one declaration was dispatched to,
        and that are enabled by ``ipv4_run``/``ipv6_run``, are returned.
        """
        if self.single_rule:
            declarations = [d for d in declarations if d.title == self.single_rule]
            if not declarations:
                self.error(f'Rule {self.single_rule!r} not found')
                self._collect(None)
                return {}

        self.registry = FamilyRegistry(self._make_rule_file)
        compiler = RuleCompiler(self.registry)
        self.results = compiler.compile_all(declarations)

        output = {}
        for family in self.registry.families:
            if not self._wanted(family):
                self.info(f'Skipping {family.label} rule set')
                continue
            output[family] = self.registry.emitter(family).render(self)

        self._collect(compiler)
        return output

    def _collect(self, compiler: RuleCompiler | None) -> None:
        self.all_errors = (compiler.get_errors() if compiler else []) + self.get_errors()
        self.all_warnings = (compiler.get_warnings() if compiler else []) + self.get_warnings()

    @property
    def failed(self) -> bool:
        return bool(self.all_errors)
