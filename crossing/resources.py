"""
Sprite resource cache.

Loads sprite images once from an asset directory and hands out the cached
pygame surfaces by name. When an image file is missing a placeholder surface
is generated instead so the game stays playable without the art pack.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union

import pygame

from crossing.logging import get_logger

log = get_logger('resources')


@dataclass(frozen=True)
class SpriteSpec:
    """Where a sprite lives on disk and how to fake it when it doesn't.

    Attributes:
        filename: Image file name relative to the asset directory
        size: Full image size (width, height) including transparent padding
        hitbox: (x, y, width, height) of the visible body inside the image,
            used to draw the placeholder
        color: RGB fill of the placeholder body
    """
    filename: str
    size: Tuple[int, int]
    hitbox: Tuple[int, int, int, int]
    color: Tuple[int, int, int]


class SpriteResources:
    """Cache of sprite surfaces keyed by sprite name.

    Examples:
        >>> resources = SpriteResources(Path('images'))
        >>> resources.load({'enemy-bug': SpriteSpec(...)})  # doctest: +SKIP
        >>> resources.get('enemy-bug')  # doctest: +SKIP
        <Surface(101x171x32 SW)>
    """

    def __init__(self, asset_dir: Optional[Union[str, Path]] = None):
        self._asset_dir = Path(asset_dir) if asset_dir is not None else None
        self._cache: Dict[str, pygame.Surface] = {}
        self._placeholders: set = set()

    @property
    def asset_dir(self) -> Optional[Path]:
        return self._asset_dir

    def load(self, specs: Mapping[str, SpriteSpec]) -> None:
        """Load every sprite in ``specs`` that is not cached yet.

        Args:
            specs: Mapping of sprite name to its SpriteSpec
        """
        for name, spec in specs.items():
            if name in self._cache:
                continue

            path = self._asset_dir / spec.filename if self._asset_dir else None
            if path is not None and path.is_file():
                self._cache[name] = pygame.image.load(str(path))
                log.debug("Loaded sprite %s from %s", name, path)
            else:
                log.warning("Sprite image for %s not found, using placeholder", name)
                self._cache[name] = self._make_placeholder(spec)
                self._placeholders.add(name)

    def get(self, name: str) -> pygame.Surface:
        """Get a loaded sprite surface.

        Raises:
            KeyError: If the sprite was never loaded
        """
        try:
            return self._cache[name]
        except KeyError:
            raise KeyError(f"Sprite '{name}' has not been loaded") from None

    def is_placeholder(self, name: str) -> bool:
        return name in self._placeholders

    def __contains__(self, name: str) -> bool:
        return name in self._cache

    @staticmethod
    def _make_placeholder(spec: SpriteSpec) -> pygame.Surface:
        surface = pygame.Surface(spec.size, pygame.SRCALPHA)
        surface.fill((0, 0, 0, 0))
        surface.fill(spec.color, pygame.Rect(spec.hitbox))
        return surface
