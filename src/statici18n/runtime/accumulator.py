"""Build-scoped accumulation of translation keys.

One KeyAccumulator lives for one build pass. Locale loading marks plural
keys; source scanning (possibly from many threads) records every key it
sees. After the scan the accumulator is finalized into an immutable
snapshot consumed by the auditor and the replicator.

Lifecycle:
    reset() -> add_key()/add_plural_key() ... -> finalize() -> reset() ...

Thread Safety:
    Inserts are atomic under an internal lock. Set union is commutative and
    idempotent, so insert order across threads does not matter.

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass

from statici18n.localization.types import TranslationKey

__all__ = ["KeyAccumulator", "KeySnapshot"]


@dataclass(frozen=True, slots=True)
class KeySnapshot:
    """Immutable key sets of a finished scan.

    Attributes:
        all_keys: Every key referenced by scanned source
        plural_keys: Keys stored as a plural table in at least one locale
    """

    all_keys: frozenset[TranslationKey]
    plural_keys: frozenset[TranslationKey]


class KeyAccumulator:
    """Thread-safe accumulator for the keys of one build pass.

    Example:
        >>> keys = KeyAccumulator()
        >>> keys.add_key("Hello $1!")
        >>> keys.add_plural_key("$1 items")
        >>> snapshot = keys.finalize()
        >>> sorted(snapshot.all_keys)
        ['Hello $1!']
    """

    __slots__ = ("_all_keys", "_finalized", "_lock", "_plural_keys")

    def __init__(self) -> None:
        """Initialize an empty, open accumulator."""
        self._lock = threading.Lock()
        self._all_keys: set[TranslationKey] = set()
        self._plural_keys: set[TranslationKey] = set()
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            msg = "KeyAccumulator is finalized; call reset() to start a new build pass"
            raise RuntimeError(msg)

    def add_key(self, key: TranslationKey) -> None:
        """Record a key referenced by source."""
        with self._lock:
            self._check_open()
            self._all_keys.add(key)

    def add_keys(self, keys: Iterable[TranslationKey]) -> None:
        """Record several keys in one atomic insert."""
        with self._lock:
            self._check_open()
            self._all_keys.update(keys)

    def add_plural_key(self, key: TranslationKey) -> None:
        """Mark a key as plural-shaped in some locale."""
        with self._lock:
            self._check_open()
            self._plural_keys.add(key)

    def is_plural(self, key: TranslationKey) -> bool:
        """Whether call sites of this key need runtime interpolation."""
        with self._lock:
            return key in self._plural_keys

    @property
    def all_keys(self) -> frozenset[TranslationKey]:
        """Snapshot of the keys recorded so far."""
        with self._lock:
            return frozenset(self._all_keys)

    @property
    def plural_keys(self) -> frozenset[TranslationKey]:
        """Snapshot of the plural keys recorded so far."""
        with self._lock:
            return frozenset(self._plural_keys)

    @property
    def finalized(self) -> bool:
        """Whether the scan phase is closed."""
        return self._finalized

    def finalize(self) -> KeySnapshot:
        """Close the scan phase and return the final key sets.

        Further inserts raise RuntimeError until reset(). Calling finalize()
        again returns an equal snapshot.
        """
        with self._lock:
            self._finalized = True
            return KeySnapshot(frozenset(self._all_keys), frozenset(self._plural_keys))

    def reset(self) -> None:
        """Clear all keys and reopen for a new build pass."""
        with self._lock:
            self._all_keys.clear()
            self._plural_keys.clear()
            self._finalized = False
