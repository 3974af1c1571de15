"""
Extension normalization.

Lowers caller-supplied extension trees into the generic element tree, or
into plain JSON values for the JSON Feed renderer.
"""

from typing import Any

from syndic_core import get_logger
from syndic_core.schemas import (
    CDataExtension,
    CDataNode,
    ElementExtension,
    ElementNode,
    Extension,
    TextExtension,
    TextNode,
)

logger = get_logger(__name__)


def _lower_node(extension: Extension) -> ElementNode:
    """Convert one extension node, leaving element children to be filled in."""
    if isinstance(extension, TextExtension):
        return ElementNode(
            name=extension.name,
            attributes=extension.attributes,
            elements=[TextNode(text=extension.text)],
        )
    if isinstance(extension, CDataExtension):
        return ElementNode(
            name=extension.name,
            attributes=extension.attributes,
            elements=[CDataNode(cdata=extension.cdata)],
        )
    if isinstance(extension, ElementExtension):
        return ElementNode(
            name=extension.name,
            attributes=extension.attributes,
            elements=[] if extension.elements is not None else None,
        )
    raise TypeError(f"Unsupported extension node: {type(extension).__name__}")


def serialize_extension(extension: Extension) -> ElementNode:
    """
    Normalize an extension tree into a generic element tree.

    Named text and CDATA leaves become a branch of that name wrapping an
    unnamed leaf; element extensions keep their name and attributes and have
    their children normalized in order. Text is copied as-is.

    Args:
        extension: Root of the extension tree.

    Returns:
        Equivalent element branch.
    """
    root = _lower_node(extension)
    # (extension, its already-lowered node)
    stack: list[tuple[Extension, ElementNode]] = [(extension, root)]

    while stack:
        current, node = stack.pop()
        if not isinstance(current, ElementExtension) or not current.elements:
            continue

        children = [(child, _lower_node(child)) for child in current.elements]
        node.elements.extend(lowered for _, lowered in children)
        stack.extend(children)

    return root


def serialize_extensions(extensions: list[Extension]) -> list[ElementNode]:
    """Normalize extensions, keeping their authored order."""
    return [serialize_extension(extension) for extension in extensions]


def extension_to_json(extension: Extension) -> Any:
    """
    Lower an extension to a JSON-compatible value.

    Text and CDATA leaves become their scalar value. Element extensions
    become an object holding their attributes (keys prefixed with ``@``) and
    their children keyed by name; repeated child names collect into a list.
    """
    if isinstance(extension, TextExtension):
        return extension.text
    if isinstance(extension, CDataExtension):
        return extension.cdata
    if isinstance(extension, ElementExtension):
        obj: dict[str, Any] = {
            f"@{key}": value
            for key, value in (extension.attributes or {}).items()
            if value is not None
        }
        merge_json_extensions(obj, extension.elements or [])
        return obj
    raise TypeError(f"Unsupported extension node: {type(extension).__name__}")


def merge_json_extensions(
    obj: dict[str, Any],
    extensions: list[Extension],
    reserved: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """
    Add lowered extensions to a JSON object in place, keyed by name.

    Repeated names collect into a list in authored order. Names in
    ``reserved`` or already present in ``obj`` are skipped with a warning.

    Args:
        obj: Object to extend.
        extensions: Extensions to lower and add.
        reserved: Keys that extensions must never take.

    Returns:
        ``obj``, for chaining.
    """
    taken = set(obj) | reserved
    added: dict[str, list[Any]] = {}

    for extension in extensions:
        if extension.name in taken:
            logger.warning(
                "Skipping extension that collides with a built-in key",
                extra={"extension": extension.name},
            )
            continue
        added.setdefault(extension.name, []).append(extension_to_json(extension))

    for name, values in added.items():
        obj[name] = values[0] if len(values) == 1 else values
    return obj
