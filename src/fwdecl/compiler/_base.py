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

"""BaseCompiler: error/warning tracking for the compiler and driver."""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class CompilerStatus(IntEnum):
    """Compiler exit status codes."""

    FWCOMPILER_SUCCESS = 0
    FWCOMPILER_WARNING = 1
    FWCOMPILER_ERROR = 2


class BaseCompiler:
    """Base class providing error/warning tracking.

    Messages may be associated with a rule; anything with a ``title``
    attribute (a RuleDeclaration, a CompileResult) or a plain title
    string passed as *rule_or_msg* together with *msg* will do.
    """

    def __init__(self) -> None:
        self._status: CompilerStatus = CompilerStatus.FWCOMPILER_SUCCESS
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._rule_errors: dict[str, list[str]] = {}

    @property
    def status(self) -> CompilerStatus:
        return self._status

    @staticmethod
    def _label(rule_or_title) -> str:
        if isinstance(rule_or_title, str):
            return rule_or_title
        return getattr(rule_or_title, 'title', '') or ''

    def _format(self, rule_or_msg, msg: str | None) -> tuple[str, str]:
        if msg is None:
            return '', str(rule_or_msg)
        label = self._label(rule_or_msg)
        text = f'Rule {label}: {msg}' if label else msg
        return label, text

    def error(self, rule_or_msg, msg: str | None = None) -> None:
        """Record an error, optionally associated with a rule."""
        label, text = self._format(rule_or_msg, msg)
        self._errors.append(text)
        if label:
            self._rule_errors.setdefault(label, []).append(text)
        self._status = CompilerStatus.FWCOMPILER_ERROR
        logger.error('%s', text)

    def warning(self, rule_or_msg, msg: str | None = None) -> None:
        """Record a warning, optionally associated with a rule."""
        label, text = self._format(rule_or_msg, msg)
        self._warnings.append(text)
        if label:
            self._rule_errors.setdefault(label, []).append(text)
        if self._status == CompilerStatus.FWCOMPILER_SUCCESS:
            self._status = CompilerStatus.FWCOMPILER_WARNING
        logger.warning('%s', text)

    def info(self, msg: str) -> None:
        logger.info('%s', msg)

    def get_errors(self) -> list[str]:
        return list(self._errors)

    def get_warnings(self) -> list[str]:
        return list(self._warnings)

    def get_errors_for_rule(self, rule, comment_sep: str = '# ') -> str:
        """Return errors/warnings for a specific rule, formatted for inline comments."""
        label = self._label(rule)
        msgs = self._rule_errors.get(label, [])
        if not msgs:
            return ''
        seen: set[str] = set()
        lines = []
        for m in sorted(msgs):
            if m not in seen:
                lines.append(f'{comment_sep}{m}')
                seen.add(m)
        return '\n'.join(lines)
