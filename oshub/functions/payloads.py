"""Decoding of Cloud Functions background-trigger payloads.

Firestore triggers deliver documents in the REST typed-value encoding::

    {"value":    {"name": "...", "fields": {"email": {"stringValue": "a@x.com"}}},
     "oldValue": {...},
     "updateMask": {"fieldPaths": ["email"]}}

and identify the changed document through ``context.resource``, a full
resource name such as
``projects/p/databases/(default)/documents/profiles/abc``.

Authentication triggers deliver the user record itself as ``data``.
"""

import base64
import re
from collections.abc import Mapping
from typing import Any, Callable, Optional

from pydantic import ValidationError

from oshub.adapters.firestore.collections import COLLECTION_PROFILES, COLLECTION_USERS
from oshub.core.events import (
    AccountEventType,
    AccountLifecycleEvent,
    ProfileDocumentEvent,
    ProfileDocumentEventType,
    UserDocumentEvent,
    UserDocumentEventType,
)
from oshub.core.exceptions import InvalidEventError
from oshub.schemas import ProfileDocument, UserDocument

USERS_DOCUMENT = f"{COLLECTION_USERS}/{{userId}}"
PROFILES_DOCUMENT = f"{COLLECTION_PROFILES}/{{profileId}}"

_RESOURCE_RE = re.compile(r"^projects/[^/]+/databases/[^/]+/documents/(?P<path>.+)$")

_SCALARS: dict[str, Callable[[Any], Any]] = {
    "stringValue": str,
    "booleanValue": bool,
    "integerValue": int,  # int64 arrives as a decimal string
    "doubleValue": float,
    "referenceValue": str,
    "timestampValue": str,  # RFC 3339, possibly with nanoseconds
    "bytesValue": base64.b64decode,
}

_COMPOSITES = frozenset({"mapValue", "arrayValue", "geoPointValue"})


def _as_mapping(obj: Any, what: str) -> Mapping[str, Any]:
    if obj is None:
        return {}
    if not isinstance(obj, Mapping):
        raise InvalidEventError(f"Malformed {what}: {obj!r}")
    return obj


def decode_value(value: Mapping[str, Any]) -> Any:
    """Decode one Firestore typed value into a plain Python value."""
    if not isinstance(value, Mapping) or len(value) != 1:
        raise InvalidEventError(f"Malformed Firestore value: {value!r}")

    ((kind, raw),) = value.items()
    if kind == "nullValue":
        return None
    if kind in _COMPOSITES and not isinstance(raw, Mapping):
        raise InvalidEventError(f"Malformed {kind}: {raw!r}")
    if kind == "mapValue":
        return decode_fields(raw.get("fields"))
    if kind == "arrayValue":
        values = raw.get("values", [])
        if not isinstance(values, list):
            raise InvalidEventError(f"Malformed arrayValue values: {values!r}")
        return [decode_value(v) for v in values]
    if kind == "geoPointValue":
        return {"latitude": raw.get("latitude", 0.0), "longitude": raw.get("longitude", 0.0)}

    convert = _SCALARS.get(kind)
    if convert is None:
        raise InvalidEventError(f"Unsupported Firestore value type '{kind}'")
    try:
        return convert(raw)
    except (TypeError, ValueError) as e:
        raise InvalidEventError(f"Bad {kind} {raw!r}: {e}") from e


def decode_fields(fields: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Decode a Firestore ``fields`` map."""
    return {name: decode_value(v) for name, v in _as_mapping(fields, "fields").items()}


def decode_document(document: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Decode a document snapshot; a missing snapshot decodes to ``{}``."""
    return decode_fields(_as_mapping(document, "document snapshot").get("fields"))


def match_document_path(resource: Any, pattern: str) -> dict[str, str]:
    """Match a document resource name against ``pattern`` and return its params.

    ``pattern`` uses the trigger syntax, e.g. ``profiles/{profileId}``.
    """
    if isinstance(resource, Mapping):
        resource = resource.get("name", "")
    if not isinstance(resource, str):
        raise InvalidEventError(f"Not a Firestore document resource: {resource!r}")
    match = _RESOURCE_RE.match(resource)
    if match is None:
        raise InvalidEventError(f"Not a Firestore document resource: {resource!r}")

    segments = match.group("path").split("/")
    expected = pattern.split("/")
    if len(segments) != len(expected):
        raise InvalidEventError(f"Document '{match.group('path')}' does not match '{pattern}'")

    params: dict[str, str] = {}
    for segment, part in zip(segments, expected):
        if part.startswith("{") and part.endswith("}"):
            params[part[1:-1]] = segment
        elif part != segment:
            raise InvalidEventError(f"Document '{match.group('path')}' does not match '{pattern}'")
    return params


def _event_id(context: Any) -> Optional[str]:
    return getattr(context, "event_id", None)


def account_event(
    event_type: AccountEventType, data: Optional[Mapping[str, Any]], context: Any
) -> AccountLifecycleEvent:
    """Build an account event from an Authentication trigger payload."""
    data = _as_mapping(data, "trigger payload")
    uid = data.get("uid")
    if not uid:
        raise InvalidEventError("Account event without uid")
    try:
        return AccountLifecycleEvent(
            event_type=event_type,
            uid=uid,
            email=data.get("email"),
            event_id=_event_id(context),
        )
    except ValidationError as e:
        raise InvalidEventError(f"Invalid user record: {e}") from e


def user_document_event(
    event_type: UserDocumentEventType, data: Optional[Mapping[str, Any]], context: Any
) -> UserDocumentEvent:
    """Build a ``users`` document event from a Firestore trigger payload."""
    data = _as_mapping(data, "trigger payload")
    params = match_document_path(getattr(context, "resource", None), USERS_DOCUMENT)
    try:
        before = None
        if event_type == UserDocumentEventType.UPDATED:
            before = UserDocument.model_validate(decode_document(data.get("oldValue")))
        return UserDocumentEvent(
            event_type=event_type,
            user_id=params["userId"],
            before=before,
            after=UserDocument.model_validate(decode_document(data.get("value"))),
            event_id=_event_id(context),
        )
    except ValidationError as e:
        raise InvalidEventError(f"Invalid user document: {e}") from e


def profile_document_event(
    event_type: ProfileDocumentEventType, data: Optional[Mapping[str, Any]], context: Any
) -> ProfileDocumentEvent:
    """Build a ``profiles`` document event from a Firestore trigger payload."""
    data = _as_mapping(data, "trigger payload")
    params = match_document_path(getattr(context, "resource", None), PROFILES_DOCUMENT)
    try:
        before = None
        if event_type == ProfileDocumentEventType.UPDATED:
            before = ProfileDocument.model_validate(decode_document(data.get("oldValue")))
        return ProfileDocumentEvent(
            event_type=event_type,
            profile_id=params["profileId"],
            before=before,
            after=ProfileDocument.model_validate(decode_document(data.get("value"))),
            event_id=_event_id(context),
        )
    except ValidationError as e:
        raise InvalidEventError(f"Invalid profile document: {e}") from e
