"""Tests for domain events and document schemas."""

import pytest
from pydantic import ValidationError

from oshub.core.events import (
    AccountEventType,
    AccountLifecycleEvent,
    ProfileDocumentEvent,
    ProfileDocumentEventType,
    UserDocumentEvent,
    UserDocumentEventType,
)
from oshub.schemas import ProfileDocument, UserDocument


def test_factories_set_event_type():
    assert AccountLifecycleEvent.created(uid="u1").event_type == AccountEventType.CREATED
    assert AccountLifecycleEvent.deleted(uid="u1").event_type == AccountEventType.DELETED

    doc = UserDocument(uid="u1")
    assert UserDocumentEvent.created(user_id="u1", after=doc).event_type == UserDocumentEventType.CREATED
    assert (
        UserDocumentEvent.updated(user_id="u1", before=doc, after=doc).event_type
        == UserDocumentEventType.UPDATED
    )

    profile = ProfileDocument(userId="u1")
    assert (
        ProfileDocumentEvent.created(profile_id="p1", after=profile).event_type
        == ProfileDocumentEventType.CREATED
    )


def test_events_are_frozen():
    event = AccountLifecycleEvent.created(uid="u1")
    with pytest.raises(ValidationError):
        event.uid = "u2"


def test_event_id_is_carried():
    event = AccountLifecycleEvent.created(uid="u1", event_id="evt-9")
    assert event.event_id == "evt-9"


def test_user_document_traits_use_camel_case_and_skip_absent():
    doc = UserDocument.model_validate(
        {"uid": "u1", "githubLogin": "alice", "isProjectMaintainer": False, "bio": "x"}
    )
    assert doc.traits() == {"githubLogin": "alice", "isProjectMaintainer": False}


def test_profile_document_aliases():
    profile = ProfileDocument.model_validate(
        {"userId": "u1", "isProjectMaintainer": True, "joinNewsletter": False}
    )
    assert profile.user_id == "u1"
    assert profile.is_project_maintainer is True
    assert profile.join_newsletter is False
