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

"""YAML reader for loading a declaration catalog into RuleDeclarations.

A catalog looks like this::

    defaults:
      chain: INPUT
    rules:
      '100 allow ssh':
        protocol: tcp
        destination_port: 22
      '200 allow monitoring':
        source: 10.0.0.5, 2001:db8::5

Every entry under ``rules`` becomes one RuleDeclaration titled by its
key.  Keys under ``defaults`` apply to every rule that does not set
them itself.
"""

import logging
import pathlib

import yaml

from ._declaration import RuleDeclaration, is_set
from .options import LEGACY_KEY_MAP, RuleOption, get_canonical_key

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(str(key) for key in RuleOption)

# Options that only make sense as booleans.
_BOOL_OPTIONS = frozenset({RuleOption.STRICT_PROTOCOL_CHECKING})


class DeclarationError(ValueError):
    """A catalog entry cannot be turned into a RuleDeclaration."""

    def __init__(self, source: str, title: str | None, msg: str) -> None:
        self.source = source
        self.title = title
        where = f'{source}: rule {title!r}' if title is not None else source
        super().__init__(f'{where}: {msg}')


def _coerce_bools(d):
    """Coerce string booleans of boolean options to Python bools.

    YAML normally handles this, but quoted values like ``"false"`` remain
    strings, and a non-empty string is truthy.  An empty value drops the
    key so that the option keeps its default.
    """
    coerced = {}
    for k, v in d.items():
        if k in _BOOL_OPTIONS and v is None:
            continue
        if k in _BOOL_OPTIONS and isinstance(v, str):
            low = v.strip().lower()
            if low in ('true', 'yes', 'on', '1'):
                coerced[k] = True
                continue
            if low in ('false', 'no', 'off', '0'):
                coerced[k] = False
                continue
        coerced[k] = v
    return coerced


def _merge(defaults, body):
    """Lay *body* over *defaults*.

    A key given a value in *body* also hides the other spelling of the
    same option in *defaults*: a rule with the legacy ``priority`` is not
    overridden by an ``order`` default.
    """
    hidden = set()
    for key, value in body.items():
        if not is_set(value):
            continue
        canonical = get_canonical_key(str(key))
        hidden.add(canonical)
        hidden.update(legacy for legacy, target in LEGACY_KEY_MAP.items() if target == canonical)
    merged = {k: v for k, v in defaults.items() if str(k) not in hidden}
    merged.update(body)
    return merged


class YamlReader:
    """Parses a YAML declaration catalog into a list of RuleDeclarations."""

    def parse(self, input_path) -> list[RuleDeclaration]:
        input_path = pathlib.Path(input_path)
        with pathlib.Path.open(input_path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
        return self.parse_data(data, source=str(input_path))

    def parse_string(self, text: str, source: str = '<string>') -> list[RuleDeclaration]:
        return self.parse_data(yaml.safe_load(text), source=source)

    def parse_data(self, data, source: str = '<data>') -> list[RuleDeclaration]:
        if data is None:
            logger.info('%s: empty catalog', source)
            return []
        if not isinstance(data, dict):
            raise DeclarationError(source, None, 'top level must be a mapping')

        unknown = set(data) - {'defaults', 'rules'}
        if unknown:
            raise DeclarationError(
                source, None, f'unknown top-level keys: {", ".join(sorted(unknown))}'
            )

        defaults = data.get('defaults') or {}
        if not isinstance(defaults, dict):
            raise DeclarationError(source, None, "'defaults' must be a mapping")
        self._check_keys(source, 'defaults', defaults)

        rules = data.get('rules') or {}
        if not isinstance(rules, dict):
            raise DeclarationError(source, None, "'rules' must be a mapping")

        declarations = []
        for title, body in rules.items():
            title = str(title)
            if body is None:
                body = {}
            if not isinstance(body, dict):
                raise DeclarationError(source, title, 'rule body must be a mapping')
            self._check_keys(source, title, body)
            merged = _coerce_bools(_merge(defaults, body))
            declarations.append(RuleDeclaration(title=title, **merged))
            logger.debug('%s: loaded rule %r', source, title)

        logger.info('%s: loaded %d rule declaration(s)', source, len(declarations))
        return declarations

    @staticmethod
    def _check_keys(source: str, title: str, body: dict) -> None:
        unknown = sorted(str(k) for k in body if str(k) not in _KNOWN_KEYS)
        if unknown:
            raise DeclarationError(
                source, title, f'unknown parameter(s): {", ".join(unknown)}'
            )
