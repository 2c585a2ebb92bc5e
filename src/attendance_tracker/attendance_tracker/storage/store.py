from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.enums import RecordType

GLOBAL_SCOPE = "_global"


class KeyValueStore(Protocol):
    """JSON documents keyed by (scope, record type).

    ``scope`` is an employee id, or ``GLOBAL_SCOPE`` for system-wide documents
    such as the employee directory.
    """

    def get(self, scope: str, record_type: RecordType) -> Optional[Any]:
        raise NotImplementedError

    def put(self, scope: str, record_type: RecordType, value: Any) -> None:
        raise NotImplementedError

    def put_many(self, scope: str, values: Mapping[RecordType, Any]) -> None:
        """Write several documents of one scope; all of them or none."""
        raise NotImplementedError
