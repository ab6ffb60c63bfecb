#!/usr/bin/env -S uv run --no-project
# /// script
# dependencies = ["pydantic>=2.11", "pydantic-settings>=2.4", "attrs>=23.1", "lazy-object-proxy>=1.10"]
# ///

"""
Export JSON Schema for the PATCH request models of a module.

Every class marked with @presence_contract in the module is exported under
$defs. Wrapper fields document as "inner type or null" and carry no default,
so consumers see which keys may be omitted.
"""

from __future__ import annotations

import importlib
import inspect
import json
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from presence.markers import has_presence_contract
from presence.options import SerializerOptions, add_presence_support
from presence.serializer import JsonSerializer


def export_schema(module_name: str = 'presence.demo', output_path: str = 'patch-schema.json'):
    """Export one JSON Schema document covering all contract classes in module_name."""

    print('=' * 80)
    print('PATCH Schema Export')
    print('=' * 80)
    print()

    module = importlib.import_module(module_name)
    contracts = [
        cls
        for _, cls in inspect.getmembers(module, inspect.isclass)
        if cls.__module__ == module.__name__ and has_presence_contract(cls)
    ]

    serializer = JsonSerializer(add_presence_support(SerializerOptions()))

    schema: dict[str, object] = {
        '$schema': 'https://json-schema.org/draft/2020-12/schema',
        'title': f'PATCH requests in {module_name}',
        'description': 'Omitted keys leave the target unchanged; null clears the target field',
    }
    definitions: dict[str, object] = {}
    for cls in contracts:
        model_schema = serializer.json_schema(cls)
        # Hoist nested definitions so every $ref resolves against the top level
        definitions.update(model_schema.pop('$defs', {}))
        definitions[cls.__name__] = model_schema
    schema['$defs'] = definitions

    output_file = Path(output_path)
    with open(output_file, 'w') as f:
        json.dump(schema, f, indent=2)

    print(f'✓ Exported JSON Schema to: {output_file}')
    print(f'  Contract classes: {", ".join(cls.__name__ for cls in contracts) or "none"}')
    print(f'  Size: {output_file.stat().st_size:,} bytes')
    print()

    return schema


if __name__ == '__main__':
    module_name = sys.argv[1] if len(sys.argv) > 1 else 'presence.demo'
    output_path = sys.argv[2] if len(sys.argv) > 2 else 'patch-schema.json'
    export_schema(module_name, output_path)
