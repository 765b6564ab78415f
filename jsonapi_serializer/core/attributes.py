"""Attribute projection from raw records."""

from __future__ import annotations

import copy
from typing import Any, Collection, Iterable, Mapping


def project_attributes(
    record: Mapping[str, Any],
    attributes: Iterable[str],
    relationship_fields: Collection[str] = (),
) -> dict[str, Any]:
    """Return whitelisted fields of ``record`` in whitelist order.

    Fields named in ``relationship_fields`` are left out, as are fields the
    record does not have. Values are deep-copied, never transformed.
    """
    projected: dict[str, Any] = {}
    for name in attributes:
        if name in relationship_fields or name not in record:
            continue
        projected[name] = copy.deepcopy(record[name])
    return projected
