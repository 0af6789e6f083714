"""Defaults operator: override ``default`` on existing leaf fields."""

import logging
from typing import Any, Mapping, Optional

from .config import resolve_strict
from .models import SchemaNode, SchemaTree, is_container
from .utils import join_path, report_mismatch

logger = logging.getLogger(__name__)


def apply_defaults(
    tree: Mapping[str, SchemaNode],
    spec: Optional[Mapping[str, Any]],
    *,
    strict: Optional[bool] = None,
) -> SchemaTree:
    """Replace the ``default`` of the leaves addressed by ``spec``.

    Keys missing from ``tree`` are ignored, so no key is ever created. Every
    node on a touched path is a new object; everything else is shared with
    ``tree``.
    """
    if not spec:
        return tree

    return _defaults(tree, spec, resolve_strict(strict), ())


def _defaults(
    tree: Mapping[str, SchemaNode],
    spec: Mapping[str, Any],
    strict: bool,
    parents: tuple[str, ...],
) -> SchemaTree:
    result = dict(tree)

    for key, value in spec.items():
        if key not in result:
            logger.debug(f"Default target {join_path(parents, key)} does not exist")
            continue

        node = result[key]
        if is_container(node):
            if isinstance(value, Mapping):
                result[key] = node.with_children(
                    _defaults(node.children, value, strict, (*parents, key))
                )
            else:
                report_mismatch(
                    logger,
                    strict,
                    join_path(parents, key),
                    f"container field expects a mapping of child defaults, got {type(value).__name__}",
                )
        else:
            result[key] = node.with_default(value)

    return result
