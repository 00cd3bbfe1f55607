from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass
class TypeInfo:
    # number of records seen for this type
    object_count: int = 0
    # sum of the source line sizes (bytes, terminator excluded)
    total_byte_size: int = 0

    def add_object(self, byte_size: int) -> None:
        self.object_count += 1
        self.total_byte_size += byte_size


class Analysis:
    """Per-type counters for one run, keyed by the serialized `type` value.

    Keys are opaque strings; the accumulator knows nothing about JSON or
    files. Iteration is always sorted by key so reports are stable.
    """
    def __init__(self):
        self._data: Dict[str, TypeInfo] = {}

    def record(self, type_key: str, byte_size: int) -> TypeInfo:
        if not isinstance(byte_size, int) or byte_size < 0:
            raise ValueError(f"byte_size must be a non-negative int, got {byte_size!r}")
        info = self._data.get(type_key)
        if info is None:
            info = self._data[type_key] = TypeInfo()
        info.add_object(byte_size)
        return info

    def items(self) -> List[Tuple[str, TypeInfo]]:
        return sorted(self._data.items())

    def get(self, type_key: str) -> Optional[TypeInfo]:
        return self._data.get(type_key)

    def total_objects(self) -> int:
        return sum(i.object_count for i in self._data.values())

    def total_bytes(self) -> int:
        return sum(i.total_byte_size for i in self._data.values())

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        return {k: asdict(v) for k, v in self.items()}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(k for k, _ in self.items())

    def __repr__(self) -> str:
        return f"Analysis({len(self._data)} types, {self.total_objects()} objects)"
