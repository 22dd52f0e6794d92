"""Tests for the submission store."""

import pytest
from profile_form.models.form_models import FormSnapshot
from profile_form.services.submission_store import SubmissionStore


def make_snapshot(name="Asha"):
    return FormSnapshot(
        name=name,
        email="a@b.com",
        mobile="9876543210",
        password="Abcd123@",
        confirmPassword="Abcd123@",
        gender="female",
        location="Pune",
        education="BSc",
        skills=["Go", "SQL"],
        file="No file uploaded",
    )


def test_store_starts_empty():
    """Test a new store holds no submissions."""
    store = SubmissionStore()
    
    assert store.list() == ()
    assert len(store) == 0


def test_append_keeps_insertion_order():
    """Test snapshots are listed oldest first."""
    store = SubmissionStore()
    first, second = make_snapshot("Asha"), make_snapshot("Ravi")
    store.append(first)
    store.append(second)
    
    assert store.list() == (first, second)
    assert [snapshot.name for snapshot in store] == ["Asha", "Ravi"]


def test_append_keeps_duplicates():
    """Test identical snapshots are all retained."""
    store = SubmissionStore()
    store.append(make_snapshot())
    store.append(make_snapshot())
    
    assert len(store) == 2


def test_list_is_read_only_view():
    """Test the listed history cannot be used to change the store."""
    store = SubmissionStore()
    store.append(make_snapshot())
    history = store.list()
    store.append(make_snapshot("Ravi"))
    
    assert isinstance(history, tuple)
    assert len(history) == 1


def test_append_rejects_non_snapshots():
    """Test only snapshots can be appended."""
    store = SubmissionStore()
    
    with pytest.raises(TypeError, match="Expected FormSnapshot"):
        store.append({"name": "Asha"})


def test_snapshot_skills_display():
    """Test the joined skills text."""
    assert make_snapshot().skills_display == "Go, SQL"
