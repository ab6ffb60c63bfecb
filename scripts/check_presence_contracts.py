#!/usr/bin/env -S uv run --no-project
# /// script
# dependencies = ["pydantic>=2.11", "pydantic-settings>=2.4", "attrs>=23.1", "lazy-object-proxy>=1.10"]
# ///

"""
Check that every class with PresenceField fields carries @presence_contract.

The marker has no runtime effect, so nothing else catches a missing one.
"""

from __future__ import annotations

import dataclasses
import importlib
import inspect
import sys
from pathlib import Path

from pydantic import BaseModel

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from presence.introspection import get_presence_fields
from presence.markers import has_presence_contract


def _aggregates(module_name: str) -> list[type]:
    module = importlib.import_module(module_name)
    return [
        cls
        for _, cls in inspect.getmembers(module, inspect.isclass)
        if cls.__module__ == module.__name__ and (issubclass(cls, BaseModel) or dataclasses.is_dataclass(cls))
    ]


def check_presence_contracts(module_name: str = 'presence.demo') -> bool:
    """Report unmarked presence aggregates and marked classes without wrapper fields."""

    print('=' * 80)
    print(f'Presence Contract Check: {module_name}')
    print('=' * 80)
    print()

    marked = []
    unmarked = []
    empty_contracts = []

    for cls in _aggregates(module_name):
        fields = get_presence_fields(cls)
        if fields and has_presence_contract(cls):
            marked.append((cls.__name__, fields))
        elif fields:
            unmarked.append((cls.__name__, fields))
        elif has_presence_contract(cls):
            empty_contracts.append(cls.__name__)

    print('✓ MARKED CONTRACTS:')
    for name, fields in marked:
        print(f'  {name}: {", ".join(fields)}')
    print()

    if empty_contracts:
        print('⚠ MARKED BUT NO PresenceField FIELDS:')
        for name in empty_contracts:
            print(f'  {name}')
        print()

    if unmarked:
        print('⚠ MISSING @presence_contract:')
        for name, fields in unmarked:
            print(f'  {name}: {", ".join(fields)}')
        print()
        return False

    print('✓ All presence aggregates are marked!')
    print()
    return True


if __name__ == '__main__':
    all_marked = check_presence_contracts(sys.argv[1] if len(sys.argv) > 1 else 'presence.demo')

    if not all_marked:
        exit(1)
