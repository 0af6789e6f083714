"""Omit operator: prune keys from a schema tree."""

import logging
from typing import Any, Mapping, Optional, Union

from .config import resolve_strict
from .models import SchemaNode, SchemaTree, is_container
from .utils import join_path, report_mismatch

logger = logging.getLogger(__name__)

OmitSpec = Union[bool, Mapping[str, Any], None]


def apply_omit(
    tree: Mapping[str, SchemaNode],
    spec: OmitSpec,
    *,
    strict: Optional[bool] = None,
) -> SchemaTree:
    """Remove the keys marked ``True`` in ``spec`` from ``tree``.

    A nested mapping in ``spec`` recurses into the matching container. Only
    the containers on an omitted path are copied; every other node keeps its
    original reference. A ``False``/``None`` spec returns ``tree`` itself.

    Args:
        tree: Schema tree to prune
        spec: Omit spec mirroring the shape of ``tree``
        strict: Raise on a nested spec aimed at a leaf instead of warning.
            ``None`` uses the configured setting.

    Returns:
        The pruned tree
    """
    if not isinstance(spec, Mapping):
        return tree

    return _omit(tree, spec, resolve_strict(strict), ())


def _omit(
    tree: Mapping[str, SchemaNode],
    spec: Mapping[str, Any],
    strict: bool,
    parents: tuple[str, ...],
) -> SchemaTree:
    result = dict(tree)

    for key, value in spec.items():
        if key not in result:
            logger.debug(f"Omit target {join_path(parents, key)} does not exist")
            continue

        if value is True:
            del result[key]
        elif isinstance(value, Mapping):
            node = result[key]
            if is_container(node):
                result[key] = node.with_children(
                    _omit(node.children, value, strict, (*parents, key))
                )
            else:
                report_mismatch(
                    logger,
                    strict,
                    join_path(parents, key),
                    "nested omit spec targets a leaf field; use True to remove it",
                )

    return result
