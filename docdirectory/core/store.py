"""
Read-only record source for the directory.

Loads doctor profiles from the directory's JSON data file and keeps the
validated collection in memory. The search engine never talks to storage
directly; it is handed the materialized list from ``list_doctors()``.

Accepted file layouts:
- a list of doctor objects
- an object with a "doctors" list
- the account file (users.json), where only entries with role "doctor"
  are doctor profiles; account fields such as password hashes are dropped
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple, Union

from pydantic import ValidationError

from docdirectory.core.config import get_data_path
from docdirectory.core.models import Doctor

logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    """Anything that can hand over the full doctor collection."""

    def list_doctors(self) -> List[Doctor]:
        ...


def _extract_entries(payload: Any) -> List[Dict[str, Any]]:
    """Pull raw doctor entries out of any supported file layout."""
    if isinstance(payload, dict):
        if "doctors" not in payload:
            raise ValueError("Directory data object has no 'doctors' key")
        payload = payload["doctors"]
    if not isinstance(payload, list):
        raise ValueError("Directory data must be a list or an object with a 'doctors' list")

    entries = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        role = entry.get("role")
        if role is not None and role != "doctor":
            continue
        entries.append(entry)
    return entries


def parse_doctors(payload: Any) -> Tuple[List[Doctor], int]:
    """
    Validate raw JSON into Doctor models.

    Parameters
    ----
    payload : Any
        Decoded JSON from the data file

    Returns
    ----
    Tuple[List[Doctor], int]
        (valid doctors in file order, number of entries skipped as invalid)

    Raises
    ----
    ValueError
        If the payload is not one of the supported layouts
    """
    doctors: List[Doctor] = []
    errors = 0
    for index, entry in enumerate(_extract_entries(payload)):
        try:
            doctor = Doctor.model_validate(entry)
        except ValidationError as e:
            errors += 1
            logger.warning(
                "Skipping invalid doctor entry #%d (%s): %s",
                index,
                entry.get("id", "no id"),
                e.errors()[0].get("msg", e),
            )
            continue
        if entry.get("role") == "doctor":
            # Account entries carry the account id, not an owner id
            doctor = doctor.model_copy(update={"user_id": None})
        doctors.append(doctor)
    return doctors, errors


class JsonDoctorStore:
    """
    Doctor collection backed by a JSON data file.

    The file is read on first access and again on ``reload()``. Readers always
    see a complete collection: a reload swaps the whole list at once.
    """

    def __init__(self, data_path: Optional[Union[str, Path]] = None):
        """
        Initialize store.

        Parameters
        ----
        data_path : str or Path, optional
            Path to the data file. If None, uses DOCDIR_DATA_PATH or the
            default OS-specific location.
        """
        self.data_path = Path(data_path) if data_path else get_data_path()
        self._doctors: Optional[List[Doctor]] = None
        self._lock = threading.Lock()
        self.load_errors = 0
        # Message of the last failed read, None after a successful one
        self.load_error: Optional[str] = None

    def _read(self) -> List[Doctor]:
        if not self.data_path.exists():
            logger.info("Data file not found, directory is empty: %s", self.data_path)
            self.load_errors = 0
            return []

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in %s: %s", self.data_path, e)
            raise ValueError(f"Invalid JSON in {self.data_path}: {e}") from e

        doctors, errors = parse_doctors(payload)
        self.load_errors = errors
        logger.info(
            "Loaded %d doctors from %s (%d skipped)", len(doctors), self.data_path, errors
        )
        return doctors

    def reload(self) -> int:
        """
        Re-read the data file.

        A failed read keeps the last good collection (an empty one if nothing
        was loaded yet) and records the message in ``load_error`` before
        re-raising, so later readers are not sent back to the broken file.

        Returns
        ----
        int
            Number of doctors now loaded

        Raises
        ----
        ValueError
            If the file is not valid JSON or has an unsupported layout
        """
        try:
            doctors = self._read()
        except ValueError as e:
            with self._lock:
                self.load_error = str(e)
                if self._doctors is None:
                    self._doctors = []
            raise

        with self._lock:
            self._doctors = doctors
            self.load_error = None
        return len(doctors)

    def list_doctors(self) -> List[Doctor]:
        """All doctors, in file order."""
        with self._lock:
            loaded = self._doctors
        if loaded is None:
            self.reload()
            with self._lock:
                loaded = self._doctors
        return list(loaded or [])


class InMemoryDoctorStore:
    """Record source over an already materialized list, used by embedders and tests."""

    def __init__(self, doctors: List[Doctor]):
        self._doctors = list(doctors)

    def list_doctors(self) -> List[Doctor]:
        return list(self._doctors)
