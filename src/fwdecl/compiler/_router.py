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

"""Version router: apply the ``version`` override and dispatch RuleOptions.

Dispatch goes through a :class:`FamilyRegistry`, which activates the
per-family rule management on first use and hands every dispatched
record to that family's emitter.
"""

from __future__ import annotations

import enum
import logging
import re
import threading
from collections.abc import Callable
from typing import Any, Protocol

from fwdecl.compiler._family import FamilyDecision
from fwdecl.compiler._rule_options import RuleOptions
from fwdecl.core import Family, is_set

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r'^(?:ip)?v?(?P<number>[46])$', re.IGNORECASE)


class IPVersion(enum.Enum):
    """Explicit address family override of a declaration."""

    UNSPECIFIED = 0
    V4 = 4
    V6 = 6

    @property
    def family(self) -> Family | None:
        if self is IPVersion.V4:
            return Family.V4
        if self is IPVersion.V6:
            return Family.V6
        return None


def parse_version(value: Any) -> IPVersion:
    """Parse a loosely written version override.

    Accepts ``4``, ``'4'``, ``'v4'``, ``'ip4'``, ``'ipv4'`` in any case,
    and the same for 6.  Unset values and anything unrecognised yield
    ``IPVersion.UNSPECIFIED``.
    """
    if not is_set(value) or isinstance(value, bool):
        return IPVersion.UNSPECIFIED
    m = _VERSION_RE.match(str(value).strip())
    if m is None:
        logger.warning('Ignoring unrecognised version %r', value)
        return IPVersion.UNSPECIFIED
    return IPVersion(int(m.group('number')))


class RuleEmitter(Protocol):
    """Receiver of the RuleOptions dispatched for one family."""

    def emit(self, title: str, options: RuleOptions) -> None: ...


class RuleCollector:
    """Emitter that only keeps what it receives, in order."""

    def __init__(self, family: Family) -> None:
        self.family = family
        self.rules: list[tuple[str, RuleOptions]] = []

    def emit(self, title: str, options: RuleOptions) -> None:
        self.rules.append((title, options))


class FamilyRegistry:
    """Per-family emitters, each created exactly once on first request.

    ``ensure()`` may be called any number of times, from any thread; the
    factory runs once per family.
    """

    def __init__(self, factory: Callable[[Family], RuleEmitter] | None = None) -> None:
        self._factory = factory or RuleCollector
        self._emitters: dict[Family, RuleEmitter] = {}
        self._lock = threading.Lock()

    def ensure(self, family: Family) -> RuleEmitter:
        """Activate management of *family* and return its emitter."""
        with self._lock:
            emitter = self._emitters.get(family)
            if emitter is None:
                emitter = self._factory(family)
                self._emitters[family] = emitter
                logger.debug('Managing %s rules', family.label)
            return emitter

    def is_managed(self, family: Family) -> bool:
        return family in self._emitters

    @property
    def families(self) -> list[Family]:
        """Managed families, IPv4 first."""
        return [f for f in Family if f in self._emitters]

    def emitter(self, family: Family) -> RuleEmitter | None:
        return self._emitters.get(family)

    def emit(self, title: str, family: Family, options: RuleOptions) -> None:
        self.ensure(family).emit(title, options)


def select_families(version: Any, decision: FamilyDecision) -> list[Family]:
    """Return the families to dispatch, an explicit override first."""
    override = parse_version(version).family
    if override is not None:
        return [override]
    families = []
    if decision.emit_v4:
        families.append(Family.V4)
    if decision.emit_v6:
        families.append(Family.V6)
    return families


def route(
    title: str,
    version: Any,
    decision: FamilyDecision,
    options: dict[Family, RuleOptions],
    registry: FamilyRegistry,
) -> dict[Family, RuleOptions]:
    """Dispatch the selected RuleOptions and return what was dispatched."""
    dispatched = {}
    for family in select_families(version, decision):
        registry.emit(title, family, options[family])
        dispatched[family] = options[family]
    return dispatched
