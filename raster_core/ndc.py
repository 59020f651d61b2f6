"""
Pixel space -> normalized device coordinates.

Samples sit at pixel centers: index i maps to continuous coordinate i + 0.5,
so index 0 lands strictly above -1 and index d-1 strictly below +1.
"""

from .types import Canvas


def normalize(coordinate: float, dimension: int) -> float:
    """
    Map a pixel coordinate to [-1, 1] using the pixel-center convention.

    Args:
        coordinate: Pixel coordinate (integer index or fractional position)
        dimension: Canvas width or height in pixels

    Returns:
        (2 * (coordinate + 0.5)) / dimension - 1.0

    Raises:
        ValueError: If dimension is not positive

    Examples:
        >>> normalize(0, 10)
        -0.9
        >>> normalize(9, 10)
        0.9
    """
    if dimension <= 0:
        raise ValueError(f"Dimension must be positive, got {dimension}")

    return (2.0 * (coordinate + 0.5)) / dimension - 1.0


def normalize_pixel(x: float, y: float, canvas: Canvas) -> tuple[float, float]:
    """Normalize x against the canvas width and y against its height."""
    return normalize(x, canvas.width), normalize(y, canvas.height)
