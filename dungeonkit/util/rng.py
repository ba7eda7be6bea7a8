"""Deterministic random number generation with isolated streams.

Each part of dungeon assembly (door meshes, wall meshes, template choice)
draws from its own random stream derived from a master seed, so that:

1. A dungeon is reproducible from the same master seed
2. Opening one more door doesn't shift which template gets picked next
3. Adding a new consumer doesn't disturb the sequences of existing ones

Usage:
    # At session startup
    from dungeonkit.util import rng
    rng.init(seed)

    # In any module - cache the stream reference
    _rng = rng.get("dungeon.doors")

    def pick_door_mesh(pool):
        return _rng.choice(pool)

    # After rng.reset(), cached references automatically use the new stream

Anything that needs randomness should also accept an explicit ``RNG`` so
callers can inject a seeded ``random.Random`` (or a stub with ``choice``).

Domain naming convention (hierarchical):
    - "dungeon.doors", "dungeon.walls"
    - "dungeon.templates"
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from dungeonkit.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers may cache this object; it looks the underlying Random instance
    up from the provider on every call, so it keeps working after reset().
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element from a non-empty sequence."""
        return self._rng().choice(seq)


# Anything that picks from a pool accepts either of these.
# Use this in type hints: `def foo(rng: RNG) -> Mesh:`
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Hands out one seeded ``Random`` per domain name.

    A domain's generator is created on first use and seeded from
    ``crc32("<master_seed>:<domain>")``, so the same master seed always
    gives the same per-domain sequences.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._generators: dict[str, Random] = {}
        self._streams: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Return the stream for ``domain``, e.g. "dungeon.doors".

        The same object comes back for the same domain, and it stays usable
        across reset().
        """
        stream = self._streams.get(domain)
        if stream is None:
            stream = self._streams[domain] = RNGStream(self, domain)
        return stream

    def _get_raw(self, domain: str) -> Random:
        generator = self._generators.get(domain)
        if generator is None:
            if self._master_seed is None:
                generator = Random()
            else:
                # hash() is salted per process; crc32 is stable
                seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                generator = Random(seed)
            self._generators[domain] = generator
        return generator

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reseed every domain from ``master_seed`` on next use."""
        self._master_seed = master_seed
        self._generators.clear()


# =============================================================================
# Shared provider
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Seed the shared provider, creating it on first call.

    Streams already handed out by get() follow the new seed.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(master_seed)
    else:
        _provider.reset(master_seed)


def get(domain: str) -> RNGStream:
    """Return a shared stream, creating an unseeded provider if needed."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reseed the shared provider, e.g. before rebuilding a dungeon."""
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
