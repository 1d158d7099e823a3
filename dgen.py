r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded record fixtures for the pollect test suites.
'''

import numpy as np
from faker import Faker
from pollect import collect, Collection
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[int, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config["_gen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "sequence":
            # monotonically increasing ids, unique per generator
            counter = self._counters.get(id(config), config.get("start", 1))
            self._counters[id(config)] = counter + config.get("step", 1)
            return counter

        elif provider == "ref":
            key = config["key"]
            if key not in record:
                raise ValueError(f"reference to '{key}' not found in the record built so far.")
            return config.get("format", "{}").format(record[key])

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_gen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _gen_provider: '{provider}'")

    def create(self, schema: Any, record: Optional[Dict] = None) -> Any:
        current_record = record or {}

        if isinstance(schema, dict):
            if "_gen_provider" in schema:
                return self._resolve_provider(schema, current_record)
            # fields are built in order so later ones can reference earlier ones
            generated = {}
            for key, field_schema in schema.items():
                generated[key] = self.create(field_schema, {**current_record, **generated})
            return generated

        if isinstance(schema, list):
            if not schema: return []
            count = schema[1] if len(schema) > 1 else 3
            return [self.create(schema[0], current_record) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> List[Dict]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Collection:
        """a list-shaped collection of count generated records"""
        return collect(self.records(count))

    def keyed(self, count: int, key: str) -> Collection:
        """a map-shaped collection of count generated records, keyed by one of their fields"""
        return collect({str(record[key]): record for record in self.records(count)})


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
