"""Presence checks for request bodies."""

from typing import Iterable, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ride_sheets_api.app.core.exceptions import ValidationError


def require_fields(
    body: Optional[BaseModel],
    fields: Iterable[str],
    nullable: Iterable[str] = (),
) -> None:
    """Raise ``ValidationError`` naming every required field the body lacks.

    ``fields`` are attribute names of the body model.  A field counts
    as missing when it is ``None`` or an empty string, except for the
    ones listed in ``nullable``: those only need to be present in the
    payload, even as ``null``.  Missing fields are reported by the
    camelCase key the client sends.
    """
    nullable = set(nullable)
    missing = []
    for name in fields:
        if body is None:
            missing.append(name)
        elif name in nullable:
            if name not in body.model_fields_set:
                missing.append(name)
        elif getattr(body, name) in (None, ""):
            missing.append(name)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(to_camel(name) for name in missing)}")
