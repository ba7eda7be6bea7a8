"""Room template catalog for thematic dungeon generation.

The catalog indexes every available room template by its specs (theme,
width, length) so a generator can ask which templates fit a slot in the
level, and tracks the largest width and length seen per theme so it can
size the level grid before choosing rooms.

It is built once from a finite scan of templates and never changes
afterwards; every query is a dictionary lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from dungeonkit import config
from dungeonkit.util import rng as rng_streams

from .errors import EmptyCatalog, InvalidRoomSpecs, UnknownSpecs, UnknownTheme

if TYPE_CHECKING:
    from dungeonkit.types import AssetReference, DungeonTheme, TileCount
    from dungeonkit.util.rng import RNG

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class RoomSpecs:
    """The (theme, width, length) triple shared by interchangeable rooms.

    Width counts the segments along the North and South walls, length the
    segments along the East and West walls. Both must be positive.
    """

    theme: DungeonTheme
    width: TileCount
    length: TileCount

    def __post_init__(self) -> None:
        for field_name in ("width", "length"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise InvalidRoomSpecs(
                    f"Room {field_name} must be a positive integer, got {value!r}"
                )


class TemplateScanner(Protocol):
    """Finds room templates in a content store."""

    def scan(self, path: str) -> Iterable[tuple[AssetReference, RoomSpecs]]: ...


class RoomAssetCatalog:
    """Index of room templates keyed by their specs.

    Attributes are read-only views; the catalog cannot be changed after it
    is built.
    """

    def __init__(self, templates: Iterable[tuple[AssetReference, RoomSpecs]]) -> None:
        """Index the given templates.

        Args:
            templates: (asset reference, specs) pairs, one per template.
                Templates sharing specs keep the order they were given in.

        Raises:
            EmptyCatalog: If ``templates`` is empty.
            InvalidRoomSpecs: If an entry's specs aren't a ``RoomSpecs``.
        """
        paths_by_specs: dict[RoomSpecs, list[AssetReference]] = {}
        max_width_by_theme: dict[DungeonTheme, TileCount] = {}
        max_length_by_theme: dict[DungeonTheme, TileCount] = {}
        count = 0

        for asset, specs in templates:
            if not isinstance(specs, RoomSpecs):
                raise InvalidRoomSpecs(
                    f"Template {asset!r} has no room specs: {specs!r}"
                )

            paths_by_specs.setdefault(specs, []).append(asset)

            # Width and length maxima are tracked independently; they need
            # not come from the same template.
            if specs.width > max_width_by_theme.get(specs.theme, 0):
                max_width_by_theme[specs.theme] = specs.width
            if specs.length > max_length_by_theme.get(specs.theme, 0):
                max_length_by_theme[specs.theme] = specs.length
            count += 1

        if count == 0:
            raise EmptyCatalog("Cannot build a room catalog from zero templates")

        self._paths_by_specs: MappingProxyType[RoomSpecs, tuple[AssetReference, ...]]
        self._paths_by_specs = MappingProxyType(
            {specs: tuple(paths) for specs, paths in paths_by_specs.items()}
        )
        self._max_width_by_theme = MappingProxyType(max_width_by_theme)
        self._max_length_by_theme = MappingProxyType(max_length_by_theme)
        self._template_count = count

        logger.info(
            f"Indexed {count} room templates across {len(self._paths_by_specs)} "
            f"specs; themes: {', '.join(sorted(self._max_width_by_theme))}"
        )

    @classmethod
    def from_scanner(
        cls, scanner: TemplateScanner, path: str = config.ROOM_ASSETS_PATH
    ) -> RoomAssetCatalog:
        """Build a catalog from every template the scanner finds under ``path``.

        ``path`` defaults to the standard room content folder.

        Raises:
            EmptyCatalog: If the scan finds nothing.
        """
        templates = list(scanner.scan(path))
        if not templates:
            raise EmptyCatalog(f"No room templates were found in the path: {path}")
        return cls(templates)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_specs(self, specs: RoomSpecs) -> bool:
        """True if at least one template has exactly these specs."""
        return specs in self._paths_by_specs

    def __contains__(self, specs: object) -> bool:
        return specs in self._paths_by_specs

    def get_asset_paths(self, specs: RoomSpecs) -> tuple[AssetReference, ...]:
        """Return every template with these specs, in the order indexed.

        Raises:
            UnknownSpecs: If no template has these specs; check with
                ``has_specs`` first.
        """
        try:
            return self._paths_by_specs[specs]
        except KeyError:
            raise UnknownSpecs(f"No room template has specs {specs}") from None

    def choose_asset_path(
        self, specs: RoomSpecs, rng: RNG | None = None
    ) -> AssetReference:
        """Pick one of the templates with these specs uniformly at random.

        Draws from the shared "dungeon.templates" stream unless ``rng`` is
        given.

        Raises:
            UnknownSpecs: If no template has these specs.
        """
        if rng is None:
            rng = rng_streams.get(config.TEMPLATE_RNG_DOMAIN)
        return rng.choice(self.get_asset_paths(specs))

    def get_max_width(self, theme: DungeonTheme) -> TileCount:
        """Return the widest room width seen for ``theme``.

        Raises:
            UnknownTheme: If no template of that theme was indexed.
        """
        try:
            return self._max_width_by_theme[theme]
        except KeyError:
            raise UnknownTheme(f"No room templates with theme {theme!r}") from None

    def get_max_length(self, theme: DungeonTheme) -> TileCount:
        """Return the longest room length seen for ``theme``.

        Raises:
            UnknownTheme: If no template of that theme was indexed.
        """
        try:
            return self._max_length_by_theme[theme]
        except KeyError:
            raise UnknownTheme(f"No room templates with theme {theme!r}") from None

    @property
    def themes(self) -> frozenset[DungeonTheme]:
        return frozenset(self._max_width_by_theme)

    def specs_for_theme(self, theme: DungeonTheme) -> list[RoomSpecs]:
        """All distinct specs of ``theme``, smallest first."""
        return sorted(specs for specs in self._paths_by_specs if specs.theme == theme)

    def __iter__(self) -> Iterator[tuple[AssetReference, RoomSpecs]]:
        for specs, paths in self._paths_by_specs.items():
            for asset in paths:
                yield asset, specs

    def __len__(self) -> int:
        return self._template_count
