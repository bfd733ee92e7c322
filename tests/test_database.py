"""Tests for the module-level engine helpers (DATABASE_URL is sqlite:// under test)."""

import pytest

from database import check_connection, get_session_context, init_db
from models import Flat
from services.errors import RecordValidationError
from services.property_store import PropertyStore


def test_check_connection():
    assert check_connection() is True


def test_session_context_commits_and_rolls_back():
    init_db()

    with get_session_context() as session:
        PropertyStore(session).create_flat({"id": "F-ctx", "name": "Context Flat", "door_number": "1", "address": "1 Test Street"})

    with pytest.raises(RecordValidationError):
        with get_session_context() as session:
            PropertyStore(session).update_flat("F-ctx", {"is_occupied": True})
            PropertyStore(session).update_flat("F-ctx", {"name": ""})

    with get_session_context() as session:
        flat = session.get(Flat, "F-ctx")
        assert flat is not None
        assert flat.is_occupied is False
        session.delete(flat)
