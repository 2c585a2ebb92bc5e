from __future__ import annotations

import copy
import json
from typing import Any, Mapping, Optional

from ..core.enums import RecordType


class InMemoryKeyValueStore:
    """Process-local store.

    Values go through a JSON round trip so callers never share mutable state
    with the store, same as a real backend.
    """

    def __init__(self, initial: Optional[dict[tuple[str, str], Any]] = None):
        self._data: dict[tuple[str, str], str] = {}
        for (scope, record_type), value in (initial or {}).items():
            self.put(scope, RecordType(record_type), value)

    def get(self, scope: str, record_type: RecordType) -> Optional[Any]:
        raw = self._data.get((str(scope), RecordType(record_type).value))
        return json.loads(raw) if raw is not None else None

    def put(self, scope: str, record_type: RecordType, value: Any) -> None:
        self._data[(str(scope), RecordType(record_type).value)] = json.dumps(copy.deepcopy(value))

    def put_many(self, scope: str, values: Mapping[RecordType, Any]) -> None:
        encoded = {(str(scope), RecordType(t).value): json.dumps(copy.deepcopy(v)) for t, v in values.items()}
        self._data.update(encoded)

    def keys(self) -> list[tuple[str, str]]:
        return sorted(self._data)
