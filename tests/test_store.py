"""
Tests for the JSON-backed doctor store.
"""
import json

import pytest

from docdirectory.core.search import get_filter_options, search_doctors
from docdirectory.core.store import JsonDoctorStore, parse_doctors


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def doctor_entries():
    return [
        {
            "id": "1",
            "slug": "dr-a",
            "name": "Dr. A",
            "specialty": "Cardiology",
            "specialties": ["Cardiology"],
            "location": {"city": "New York", "state": "NY"},
            "conditions": ["arrhythmia"],
            "bio": "",
        },
        {
            "id": "2",
            "slug": "dr-b",
            "name": "Dr. B",
            "specialty": "Orthopedics",
            "specialties": ["Orthopedics", "Sports Medicine"],
            "location": {"city": "Los Angeles", "state": "CA"},
            "conditions": ["ACL reconstruction"],
            "bio": "",
        },
    ]


class TestFileLayouts:
    """Supported and unsupported shapes of the data file."""

    def test_load_list_layout(self, tmp_path, doctor_entries):
        store = JsonDoctorStore(_write(tmp_path / "doctors.json", doctor_entries))
        doctors = store.list_doctors()
        assert [d.id for d in doctors] == ["1", "2"]
        assert doctors[1].specialties == ["Orthopedics", "Sports Medicine"]

    def test_load_object_layout(self, tmp_path, doctor_entries):
        store = JsonDoctorStore(_write(tmp_path / "doctors.json", {"doctors": doctor_entries}))
        assert [d.name for d in store.list_doctors()] == ["Dr. A", "Dr. B"]

    def test_load_users_layout_skips_admins(self, tmp_path, doctor_entries):
        users = [
            {"id": "admin-1", "email": "admin@example.com", "password": "$2a$10$hash",
             "name": "Admin", "role": "admin", "createdAt": "2024-01-01"},
        ]
        for entry in doctor_entries:
            users.append(dict(entry, role="doctor", email="doc@example.com",
                              password="$2a$10$hash", userId="owner"))

        store = JsonDoctorStore(_write(tmp_path / "users.json", users))
        doctors = store.list_doctors()

        assert [d.id for d in doctors] == ["1", "2"]
        assert all(d.user_id is None for d in doctors)
        assert "password" not in doctors[0].to_dict()

    def test_scalar_payload_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_doctors("just a string")

    def test_object_without_doctors_key_raises_value_error(self, doctor_entries):
        with pytest.raises(ValueError, match="doctors"):
            parse_doctors({"users": doctor_entries})

    def test_doctors_key_must_hold_a_list(self):
        with pytest.raises(ValueError):
            parse_doctors({"doctors": {"1": {"name": "Dr. A"}}})

    def test_object_layout_without_doctors_key_fails_store_load(self, tmp_path, doctor_entries):
        store = JsonDoctorStore(_write(tmp_path / "doctors.json", {"users": doctor_entries}))
        with pytest.raises(ValueError):
            store.list_doctors()


class TestEntryValidation:
    """Per-entry validation while parsing."""

    def test_invalid_entries_are_skipped(self, tmp_path, doctor_entries):
        broken = {"id": "3", "name": "No Specialty"}
        store = JsonDoctorStore(_write(tmp_path / "doctors.json", doctor_entries + [broken]))
        assert [d.id for d in store.list_doctors()] == ["1", "2"]
        assert store.load_errors == 1

    def test_null_lists_are_loaded_as_empty(self):
        entry = {
            "id": "1",
            "name": "Dr. Null",
            "specialty": "Cardiology",
            "specialties": None,
            "conditions": None,
            "education": None,
            "certifications": None,
        }
        doctors, errors = parse_doctors([entry])

        assert errors == 0
        assert doctors[0].specialties == []
        assert doctors[0].conditions == []
        # Still findable and contributes no specialty option
        assert [d.name for d in search_doctors(doctors, "null")] == ["Dr. Null"]
        assert get_filter_options(doctors).specialties == []


class TestLoading:
    """Lazy loading, reloads and read failures."""

    def test_missing_file_is_empty_directory(self, tmp_path):
        store = JsonDoctorStore(tmp_path / "nope.json")
        assert store.list_doctors() == []

    def test_invalid_json_raises_value_error(self, tmp_path):
        path = tmp_path / "doctors.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            JsonDoctorStore(path).list_doctors()

    def test_failed_first_load_leaves_empty_directory(self, tmp_path):
        path = tmp_path / "doctors.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonDoctorStore(path)

        with pytest.raises(ValueError):
            store.reload()

        assert "Invalid JSON" in store.load_error
        # The broken file is not re-read on every access
        assert store.list_doctors() == []

    def test_failed_reload_keeps_last_good_data(self, tmp_path, doctor_entries):
        path = _write(tmp_path / "doctors.json", doctor_entries)
        store = JsonDoctorStore(path)
        assert store.reload() == 2

        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            store.reload()

        assert [d.id for d in store.list_doctors()] == ["1", "2"]
        assert store.load_error is not None

        _write(path, doctor_entries[:1])
        assert store.reload() == 1
        assert store.load_error is None

    def test_reload_picks_up_changes(self, tmp_path, doctor_entries):
        path = _write(tmp_path / "doctors.json", doctor_entries[:1])
        store = JsonDoctorStore(path)
        assert len(store.list_doctors()) == 1

        _write(path, doctor_entries)
        # Cached until reloaded
        assert len(store.list_doctors()) == 1
        assert store.reload() == 2
        assert len(store.list_doctors()) == 2

    def test_data_path_from_environment(self, tmp_path, monkeypatch, doctor_entries):
        path = _write(tmp_path / "env.json", doctor_entries)
        monkeypatch.setenv("DOCDIR_DATA_PATH", str(path))
        store = JsonDoctorStore()
        assert store.data_path == path
        assert len(store.list_doctors()) == 2
