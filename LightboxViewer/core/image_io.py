"""Image I/O utilities for loading and converting images.

This module provides functions for:
- Resolving image references (absolute URLs, paths relative to a base URL,
  local files)
- Loading images into NumPy arrays (requests for remote references,
  Pillow for decoding)
- Converting NumPy arrays to QImage for Qt display

All functions are UI-independent apart from the QImage conversion.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Union
from urllib.parse import urljoin, urlparse

import numpy as np
import requests
from PIL import Image, ImageOps, UnidentifiedImageError
from PySide6.QtGui import QImage

from .constants import REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class ImageLoadError(RuntimeError):
    """Raised when an image reference cannot be turned into pixels."""

    def __init__(self, reference: str, reason: str):
        super().__init__(f"Cannot open image: {reference} ({reason})")
        self.reference = reference
        self.reason = reason


def is_remote(reference: str) -> bool:
    """Return True for ``http://`` and ``https://`` references."""
    return urlparse(str(reference)).scheme.lower() in ("http", "https")


def resolve_reference(reference: str, base_url: str = "") -> str:
    """Turn an image reference into something ``load_image`` can fetch.

    Absolute URLs are returned unchanged. With a ``base_url``, any other
    reference is joined onto it (``/uploads/a.jpg`` -> ``https://host/uploads/a.jpg``).
    Without one, the reference is treated as a local path.

    Example:
        >>> resolve_reference("/uploads/a.jpg", "https://shop.example")
        'https://shop.example/uploads/a.jpg'
    """
    reference = str(reference).strip()
    if is_remote(reference) or not base_url:
        return reference
    if not base_url.endswith("/"):
        base_url += "/"
    return urljoin(base_url, reference.lstrip("/"))


def decode_image(data: bytes, reference: str = "<bytes>") -> np.ndarray:
    """Decode encoded image bytes into an (H, W, 3|4) uint8 array.

    EXIF orientation is applied so the array is upright.

    Raises:
        ImageLoadError: If Pillow cannot identify or decode the data.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            img = ImageOps.exif_transpose(img)
            if img.mode not in ("RGB", "RGBA"):
                img = img.convert("RGBA" if "A" in img.getbands() or "transparency" in img.info else "RGB")
            return np.asarray(img, dtype=np.uint8).copy()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageLoadError(reference, str(e)) from e


def fetch_bytes(url: str, timeout: float = REQUEST_TIMEOUT, session=None) -> bytes:
    """Download ``url`` and return the response body.

    Raises:
        ImageLoadError: On connection errors, timeouts and non-2xx responses.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ImageLoadError(url, str(e)) from e
    return resp.content


def load_image(reference: Union[str, Path], base_url: str = "", timeout: float = REQUEST_TIMEOUT, session=None) -> np.ndarray:
    """Load an image reference into a NumPy array.

    Supported inputs:
      - ``http(s)://`` URLs, fetched with requests
      - references relative to ``base_url``, when one is given
      - local file paths

    Args:
        reference: Image reference (URL or path).
        base_url: Prefix for relative references ("" for local files).
        timeout: Network timeout in seconds.
        session: Optional ``requests.Session`` to reuse connections.

    Returns:
        np.ndarray: (H, W, 3) RGB or (H, W, 4) RGBA uint8 array.

    Raises:
        ImageLoadError: If the reference cannot be read or decoded.
    """
    resolved = resolve_reference(str(reference), base_url)
    if is_remote(resolved):
        logger.debug("Fetching %s", resolved)
        data = fetch_bytes(resolved, timeout=timeout, session=session)
    else:
        path = Path(resolved).expanduser()
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ImageLoadError(resolved, e.strerror or str(e)) from e
    return decode_image(data, resolved)


_QIMAGE_FORMATS = {3: QImage.Format_RGB888, 4: QImage.Format_RGBA8888}


def numpy_to_qimage(arr: np.ndarray) -> QImage:
    """Convert a uint8 array from ``load_image`` to a QImage.

    The returned QImage owns a copy of the pixel data, so the caller does not
    need to keep the NumPy array alive.

    Supported input shapes:
      - (H, W) -> 8-bit grayscale
      - (H, W, 3) -> RGB
      - (H, W, 4) -> RGBA

    Raises:
        ValueError: For any other shape or a non-uint8 dtype.
    """
    if arr is None:
        return QImage()
    a = np.ascontiguousarray(arr)
    if a.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 array, got {a.dtype}")
    if a.ndim == 2:
        h, w = a.shape
        return QImage(a.data, w, h, w, QImage.Format_Grayscale8).copy()
    if a.ndim == 3 and a.shape[2] in _QIMAGE_FORMATS:
        h, w, c = a.shape
        return QImage(a.data, w, h, c * w, _QIMAGE_FORMATS[c]).copy()
    raise ValueError(f"Unsupported array shape {a.shape}")
