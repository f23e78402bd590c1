"""Image IO - Readers and writers for 8-bit grayscale rasters."""
from ijstretch.IO.base import ImageReader, ImageWriter
from ijstretch.IO.png import PngReader, PngWriter

__all__ = ['ImageReader', 'ImageWriter', 'PngReader', 'PngWriter']
