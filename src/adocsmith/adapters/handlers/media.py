"""Image handler."""

from __future__ import annotations

from bs4.element import Tag

from adocsmith.core.context import ConversionContext
from adocsmith.core.rules import renders

from ._helpers import iter_attributes


_DEFAULT_ALIGNMENTS = frozenset({"middle", "top"})
_ACCEPTED_NAMESPACES = frozenset({"", "http://www.w3.org/1999/xhtml"})
_IGNORED_ATTRIBUTES = frozenset({"style", "madcap:mediastyle"})


@renders("img", name="images")
def render_image(element: Tag, context: ConversionContext) -> str:
    """Render an image as a block when it opens a paragraph, inline otherwise."""
    target: str | None = None
    title = ""
    for name, value in iter_attributes(element):
        if name == "src":
            directory, _, target = value.replace("\\", "/").rpartition("/")
            if context.image_directory is None:
                context.image_directory = directory
            elif directory.lower() != context.image_directory.lower():
                context.warn(
                    f"Image directory '{directory}' differs from '{context.image_directory}'"
                )
        elif name == "alt":
            title = value
        elif name in _IGNORED_ATTRIBUTES:
            continue
        elif name == "align":
            if value.lower() not in _DEFAULT_ALIGNMENTS:
                context.warn(f"Unsupported image alignment '{value}'")
        elif name == "xmlns":
            if value not in _ACCEPTED_NAMESPACES:
                context.warn(f"Unsupported image namespace '{value}'")
        else:
            context.warn(f"Unsupported attribute {name}='{value}' on <img>")

    if target is None:
        context.warn("Image without src skipped")
        return ""
    return context.formatter.image(target, title, block=context.at_paragraph_start)
