"""Extend operator: insert new fields and merge children into containers.

Extension entries are told apart by type alone:

- a ``LeafField``/``ContainerField`` instance is a ready-made field and is
  inserted verbatim; a field literal (a mapping with a string ``kind``) is
  parsed into one first, see ``tag_extension``;
- any other mapping is a nested extension and stands for a container whose
  children are interpreted the same way.

New keys at a level that already has keys are placed in front of them, the
last one processed first. Containers synthesized from a nested extension
keep the extension's own order.
"""

import logging
from typing import Any, Mapping, Optional

from .config import resolve_strict
from .models import (
    ContainerField,
    SchemaNode,
    SchemaTree,
    is_container,
    is_field,
    tag_extension,
)
from .utils import join_path, report_mismatch

logger = logging.getLogger(__name__)


def apply_extend(
    tree: Mapping[str, SchemaNode],
    spec: Optional[Mapping[str, Any]],
    *,
    strict: Optional[bool] = None,
) -> SchemaTree:
    """Merge ``spec`` into ``tree``.

    Args:
        tree: Schema tree to extend
        spec: Extend spec mirroring the shape of ``tree``
        strict: Raise on entries that cannot be applied instead of warning.
            ``None`` uses the configured setting.

    Returns:
        The extended tree. Existing containers that receive new children
        keep their own label, description and other attributes.

    Raises:
        SchemaDefinitionError: A field literal in ``spec`` is invalid
    """
    if not spec:
        return tree

    return _extend(tree, tag_extension(spec), resolve_strict(strict), ())


def build_children(
    extension: Mapping[str, Any], *, strict: Optional[bool] = None
) -> SchemaTree:
    """Convert a nested extension into the children of a new container."""
    return _build(tag_extension(extension), resolve_strict(strict), ())


def _extend(
    tree: Mapping[str, SchemaNode],
    spec: Mapping[str, Any],
    strict: bool,
    parents: tuple[str, ...],
) -> SchemaTree:
    result = dict(tree)
    inserted: dict[str, SchemaNode] = {}

    for key, entry in spec.items():
        if key not in result:
            node = _convert(entry, strict, parents, key)
            if node is not None:
                inserted[key] = node
            continue

        current = result[key]
        if is_container(current) and (is_container(entry) or _is_nested(entry)):
            extension = entry.children if is_container(entry) else entry
            result[key] = current.with_children(
                _extend(current.children, extension, strict, (*parents, key))
            )
        elif is_field(entry):
            result[key] = entry
        elif _is_nested(entry):
            report_mismatch(
                logger,
                strict,
                join_path(parents, key),
                "nested extension targets a leaf field",
            )
        else:
            report_mismatch(
                logger,
                strict,
                join_path(parents, key),
                f"extend entry must be a field or a mapping, got {type(entry).__name__}",
            )

    if not inserted:
        return result

    logger.debug(f"Inserted {', '.join(inserted)} at {join_path(parents)}")
    ordered = {key: inserted[key] for key in reversed(inserted)}
    ordered.update(result)
    return ordered


def _build(
    extension: Mapping[str, Any], strict: bool, parents: tuple[str, ...]
) -> SchemaTree:
    children: SchemaTree = {}
    for key, entry in extension.items():
        node = _convert(entry, strict, parents, key)
        if node is not None:
            children[key] = node
    return children


def _convert(
    entry: Any, strict: bool, parents: tuple[str, ...], key: str
) -> Optional[SchemaNode]:
    if is_field(entry):
        return entry

    if _is_nested(entry):
        return ContainerField(children=_build(entry, strict, (*parents, key)))

    report_mismatch(
        logger,
        strict,
        join_path(parents, key),
        f"extend entry must be a field or a mapping, got {type(entry).__name__}",
    )
    return None


def _is_nested(entry: Any) -> bool:
    return isinstance(entry, Mapping) and not is_field(entry)
