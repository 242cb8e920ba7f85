"""
Noteful API: Request Payload Validation
=========================================

What:  Field-list driven checks shared by the folder and note services.
How:   Each helper takes the already-parsed payload dict plus the field
       names to consider, and either returns the subset to persist or
       raises ValidationError (→ 400).

    require_fields     POST:  every listed field present and non-blank
                              (blank allowed for `allow_blank` fields)
    pick_present       POST:  optional fields, kept only when supplied
    require_any_field  PATCH: at least one listed field with a non-blank value
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from noteful.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    """None and whitespace-only strings both count as absent."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_fields(
    payload: Mapping[str, Any],
    fields: Sequence[str],
    allow_blank: Sequence[str] = (),
) -> Dict[str, Any]:
    """
    Extract `fields` from `payload`, failing on the first one that is missing.

    Fields are checked in the order given, so the error always names the
    first missing field. Keys not listed in `fields` are dropped. Fields in
    `allow_blank` only have to be non-null, so an empty string passes.

    Raises:
        ValidationError: "Missing '<field>' in request body"
    """
    record = {field: payload.get(field) for field in fields}
    for field, value in record.items():
        if value is None or (field not in allow_blank and is_missing(value)):
            raise ValidationError(
                message=f"Missing '{field}' in request body",
                field=field,
            )
    return record


def pick_present(payload: Mapping[str, Any], fields: Sequence[str]) -> Dict[str, Any]:
    """Optional create-time fields, included only when the client sent a value."""
    return {field: payload[field] for field in fields if payload.get(field) is not None}


def require_any_field(
    payload: Mapping[str, Any],
    fields: Sequence[str],
    hint_fields: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """
    Collect the partial-update changes from `payload`.

    Only `fields` are considered; entries whose value is absent, falsy or
    a whitespace-only string are stripped. If nothing is left the request
    is rejected.

    Args:
        payload:     Parsed request body
        fields:      Columns the client may change
        hint_fields: Fields named in the error message (defaults to `fields`)

    Raises:
        ValidationError: "Request body must contain a 'name', 'content', ..."
    """
    changes = {
        field: payload[field]
        for field in fields
        if payload.get(field) and not is_missing(payload[field])
    }
    if not changes:
        listed = ", ".join(f"'{field}'" for field in (hint_fields or fields))
        raise ValidationError(
            message=f"Request body must contain a {listed}",
            context={"accepted_fields": list(fields)},
        )
    return changes
