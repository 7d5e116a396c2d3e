"""An 8-bit grayscale raster held in memory."""

from __future__ import annotations

from .geometry import is_in_circle

WHITE = 255
BLACK = 0


class GrayImage:
    """A top-down, one-byte-per-pixel grayscale image."""

    def __init__(self, width: int = 640, height: int = 480, gray: int = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = bytearray([gray]) * (width * height)

    @property
    def pitch(self) -> int:
        """Bytes per row."""
        return self.width

    def fill(self, gray: int) -> None:
        """Set every pixel to one gray level."""
        self.pixels[:] = bytes([gray]) * len(self.pixels)

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) is a pixel of the image."""
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the gray level at (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y * self.pitch + x]

    def draw_disc(self, x: int, y: int, radius: int, gray: int) -> None:
        """Paint a filled disc centred at (x, y), clipped to the image."""
        last = self.width * self.height
        for j in range(max(y - radius, 0), min(y + radius, self.height + 1)):
            row = j * self.pitch
            for i in range(max(x - radius, 0), min(x + radius, self.width + 1)):
                idx = row + i
                if idx < last and is_in_circle(i, j, x, y, radius):
                    self.pixels[idx] = gray

    def to_pgm(self) -> bytes:
        """Encode the image as a binary PGM (P5) file."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self.pixels)