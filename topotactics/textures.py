"""A cache of images loaded from the assets directory."""

from pathlib import Path

import pygame

from .geometry import Rect

DEFAULT_ASSETS_DIR = Path("../assets")


def _crop(image: "pygame.Surface", bounds) -> "pygame.Surface":
    if isinstance(bounds, Rect):
        left, top, width, height = bounds.left, bounds.top, bounds.width, bounds.height
    else:
        left, top, width, height = bounds
    left, top, width, height = int(left), int(top), int(width), int(height)
    image_width, image_height = image.get_size()
    if left <= 0 and top <= 0 and width >= image_width and height >= image_height:
        return image
    left, top = max(left, 0), max(top, 0)
    width = min(width, image_width - left)
    height = min(height, image_height - top)
    if width <= 0 or height <= 0:
        raise ValueError(f"texture area {bounds!r} lies outside the image")
    return image.subsurface((left, top, width, height)).copy()


class TextureManager:
    """Loads PNG images by name and keeps them for reuse."""

    def __init__(self, assets_dir=DEFAULT_ASSETS_DIR) -> None:
        self.assets_dir = Path(assets_dir)
        self._textures: dict[str, pygame.Surface] = {}

    def load(self, file_name: str, bounds=None, map_name: str | None = None) -> "pygame.Surface":
        """Load <file_name>.png, optionally cropped, and store it under map_name or file_name."""
        path = self.assets_dir / f"{file_name}.png"
        if not path.is_file():
            raise FileNotFoundError(f"texture file not found: {path}")
        image = pygame.image.load(str(path))
        if bounds is not None:
            image = _crop(image, bounds)
        self._textures[file_name if map_name is None else map_name] = image
        return image

    def get(self, name: str) -> "pygame.Surface":
        """Return a stored texture, loading <name>.png on first use."""
        if name not in self._textures:
            return self.load(name)
        return self._textures[name]

    def clear(self) -> None:
        self._textures.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._textures

    def __len__(self) -> int:
        return len(self._textures)