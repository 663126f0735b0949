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

"""RuleCompiler: turns RuleDeclarations into dispatched RuleOptions.

Each declaration is compiled on its own: parameter migration, address
classification of source and destination, family decision, building
both RuleOptions and routing them to the registry.  A declaration whose
addresses are all invalid yields a failed :class:`CompileResult`; the
remaining declarations of a batch are compiled regardless.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from fwdecl.compiler._address import classify_addresses
from fwdecl.compiler._base import BaseCompiler
from fwdecl.compiler._family import AllAddressesInvalidError, decide_families
from fwdecl.compiler._router import FamilyRegistry, route
from fwdecl.compiler._rule_options import RuleOptions, build_rule_options
from fwdecl.core import Family, RuleDeclaration
from fwdecl.core.options import resolve_order


@dataclasses.dataclass
class CompileResult:
    """Outcome of compiling one declaration."""

    title: str
    dispatched: dict[Family, RuleOptions] = dataclasses.field(default_factory=dict)
    warnings: list[str] = dataclasses.field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RuleCompiler(BaseCompiler):
    """Compiles declarations and dispatches the results to a registry."""

    def __init__(self, registry: FamilyRegistry | None = None) -> None:
        super().__init__()
        self.registry: FamilyRegistry = registry if registry is not None else FamilyRegistry()

    def _warn(self, result: CompileResult, msg: str) -> None:
        result.warnings.append(msg)
        self.warning(result, msg)

    def compile(self, declaration: RuleDeclaration) -> CompileResult:
        """Compile and dispatch a single declaration."""
        result = CompileResult(title=declaration.title)

        order, notice = resolve_order(declaration.order, declaration.priority)
        if notice:
            self._warn(result, notice)

        source = classify_addresses(declaration.source)
        destination = classify_addresses(declaration.destination)

        try:
            decision = decide_families(declaration.title, source, destination)
        except AllAddressesInvalidError as e:
            result.error = str(e)
            self.error(result, result.error)
            return result

        if decision.skipped:
            self._warn(
                result,
                f'skipping invalid address(es): {", ".join(decision.skipped)}',
            )

        options = build_rule_options(declaration, source, destination, order)
        result.dispatched = route(
            declaration.title,
            declaration.version,
            decision,
            options,
            self.registry,
        )
        return result

    def compile_all(self, declarations: Iterable[RuleDeclaration]) -> list[CompileResult]:
        """Compile every declaration; failures do not stop the batch."""
        results = [self.compile(d) for d in declarations]
        failed = sum(1 for r in results if not r.ok)
        self.info(f'Compiled {len(results)} declaration(s), {failed} failed')
        return results
