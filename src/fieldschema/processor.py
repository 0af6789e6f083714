"""Apply a transform request to a component's base schema."""

import logging
from typing import Any, Mapping, Optional, Union

from .config import resolve_strict
from .defaults import apply_defaults
from .extend import apply_extend
from .models import SchemaNode, SchemaTree, TransformRequest
from .omit import apply_omit

logger = logging.getLogger(__name__)


def process_schema(
    base: Mapping[str, SchemaNode],
    request: Union[TransformRequest, Mapping[str, Any], None] = None,
    *,
    strict: Optional[bool] = None,
) -> SchemaTree:
    """Run omit, extend and defaults over ``base``, in that order.

    Each section present in ``request`` is applied exactly once. Sections
    are not checked against each other, so ``extend`` may add back a key
    that ``omit`` just removed.

    ``base`` is never modified. Untouched branches of the result are
    shared with ``base``; callers must not write into the returned tree.

    Args:
        base: Base schema tree of a component type
        request: ``TransformRequest`` or a mapping with any of the
            ``omit``/``extend``/``defaults`` keys
        strict: Raise ``SchemaTransformError`` on spec/target shape
            mismatches. ``None`` uses the configured setting.

    Returns:
        ``base`` itself when there is nothing to apply, otherwise a new tree
    """
    if request is None:
        return base

    request = TransformRequest.coerce(request)
    if request.is_empty():
        return base

    strict = resolve_strict(strict)
    result = base

    if request.omit is not None:
        logger.debug("Applying omit spec")
        result = apply_omit(result, request.omit, strict=strict)

    if request.extend is not None:
        logger.debug("Applying extend spec")
        result = apply_extend(result, request.extend, strict=strict)

    if request.defaults is not None:
        logger.debug("Applying defaults spec")
        result = apply_defaults(result, request.defaults, strict=strict)

    return result
