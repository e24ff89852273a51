"""Helpers shared by the job and company access layers."""

import logging
from typing import Any, AbstractSet, Dict, Mapping

from jobly.core.errors import BadRequestError


logger = logging.getLogger(__name__)


def prepare_update_fields(
    data: Mapping[str, Any],
    identity_fields: AbstractSet[str],
    updatable_fields: AbstractSet[str],
) -> Dict[str, Any]:
    """
    Restrict an update request to fields the entity allows to change.

    Identity fields are dropped silently so they can never be rewritten.
    Any other unrecognized field is rejected, which keeps caller-supplied
    keys out of the generated SET clause.

    Returns:
        A new dict holding the remaining fields in their original order.

    Raises:
        BadRequestError: If a key is neither an identity nor an updatable field.
    """
    dropped = [key for key in data if key in identity_fields]
    if dropped:
        logger.debug(f"Ignoring identity fields in update: {dropped}")

    fields = {key: value for key, value in data.items() if key not in identity_fields}

    unknown = sorted(key for key in fields if key not in updatable_fields)
    if unknown:
        raise BadRequestError(f"Unknown fields: {', '.join(unknown)}")

    return fields
