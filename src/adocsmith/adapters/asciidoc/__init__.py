"""AsciiDoc output adapter."""

from __future__ import annotations

from .converter import AsciiDocConverter
from .formatter import AsciiDocFormatter
from .utils import append_fragment, normalize_output


__all__ = ["AsciiDocConverter", "AsciiDocFormatter", "append_fragment", "normalize_output"]
