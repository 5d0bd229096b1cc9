"""Content-addressed style registry for one extraction run."""
import hashlib
import json
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

FLOAT_PRECISION = 4


@dataclass(frozen=True)
class StyleEntry:
    """A registered style value, its reference id and its canonical JSON text."""
    id: str
    value: Any
    serialized: str


def canonicalize(value: Any, defaults: Optional[Mapping[str, Any]] = None) -> Any:
    """Normalize a style value so structurally equal inputs compare equal.

    Dict keys are sorted, floats are rounded (integral floats become ints
    and -0.0 becomes 0), and None values, empty containers and top-level
    fields equal to their entry in `defaults` are dropped.
    """
    normalized = _normalize(value)
    if defaults and isinstance(normalized, dict):
        normalized = {
            k: v for k, v in normalized.items()
            if k not in defaults or to_canonical_json(_normalize(defaults[k])) != to_canonical_json(v)
        }
    return normalized


def _normalize(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        rounded = round(value, FLOAT_PRECISION)
        if rounded == int(rounded):
            return int(rounded)
        return rounded
    if isinstance(value, dict):
        result = {}
        for k in sorted(value, key=str):
            v = _normalize(value[k])
            if _is_empty(v):
                continue
            result[str(k)] = v
        return result
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list)) and not value)


def to_canonical_json(canonical: Any) -> str:
    """Compact, key-sorted JSON text of a canonical value."""
    return json.dumps(canonical, sort_keys=True, separators=(',', ':'), ensure_ascii=False)


def content_hash(canonical: Any) -> str:
    """Generate a SHA-512 hash of a canonical value."""
    return hashlib.sha512(to_canonical_json(canonical).encode('utf-8')).hexdigest()


class StyleRegistry:
    """Maps canonicalized style objects to stable reference ids.

    Structurally equal values (after canonicalization) always resolve to
    the same id within one registry. A hash match is only trusted when the
    canonical JSON texts are identical (so `true` and `1` differ); a
    collision gets a new id.

    Ids are `<prefix>_<n>` with a sequential counter per prefix, assigned
    in first-seen order, so output is deterministic for a given input.

    Args:
        hash_fn: Function hashing a canonical value (default SHA-512 of
            its compact JSON form).
    """

    def __init__(self, hash_fn: Callable[[Any], str] = content_hash) -> None:
        self._hash_fn = hash_fn
        self._by_hash: Dict[str, List[StyleEntry]] = {}
        self._styles: Dict[str, Any] = {}
        self._counters: Dict[str, int] = {}
        self._log: List[Tuple[str, str, str]] = []

    def intern(
        self,
        value: Any,
        prefix: str = 'style',
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Register a style value and return its reference id.

        Args:
            value: Style object produced by a transformer.
            prefix: Id prefix for a newly assigned id (e.g. 'fill').
            defaults: Top-level fields dropped when equal to these values.

        Returns:
            The id of the existing structurally equal entry, or a new id.
        """
        canonical = canonicalize(value, defaults)
        serialized = to_canonical_json(canonical)
        digest = self._hash_fn(canonical)

        bucket = self._by_hash.setdefault(digest, [])
        for entry in bucket:
            if entry.serialized == serialized:
                logger.debug("Style %s reused", entry.id)
                return entry.id

        count = self._counters.get(prefix, 0) + 1
        self._counters[prefix] = count
        style_id = f"{prefix}_{count}"

        bucket.append(StyleEntry(id=style_id, value=canonical, serialized=serialized))
        self._styles[style_id] = canonical
        self._log.append((style_id, digest, prefix))
        return style_id

    @property
    def styles(self) -> Mapping[str, Any]:
        """Read-only, insertion-ordered view of id → style value."""
        return MappingProxyType(self._styles)

    def get(self, style_id: str) -> Any:
        return self._styles.get(style_id)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    # ── Checkpoints ──────────────────────────────────────────────────────

    def checkpoint(self) -> int:
        """Return a marker for the current registry contents."""
        return len(self._log)

    def rollback(self, mark: int) -> None:
        """Remove every entry registered after `mark`.

        Counters are rewound as well, so ids stay dense.
        """
        while len(self._log) > mark:
            style_id, digest, prefix = self._log.pop()
            del self._styles[style_id]
            bucket = self._by_hash[digest]
            bucket[:] = [e for e in bucket if e.id != style_id]
            if not bucket:
                del self._by_hash[digest]
            self._counters[prefix] -= 1
