"""Read and write the sessions file.

The whole collection is loaded and saved as one unit. Saving goes through a
temp file in the same directory that is renamed over the original, so a
failed write leaves the previous content untouched.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Sequence

from clistudy.data.errors import CorruptStore, StorageUnavailable, WriteFailure
from clistudy.data.models import Session

logger = logging.getLogger(__name__)


def load_sessions(path: Path) -> List[Session]:
    """Read sessions.json and return its sessions in stored order.

    A missing or blank file is a first run and yields an empty list.

    Raises:
        CorruptStore: If the content is not UTF-8 text holding a JSON list of
            session objects.
        StorageUnavailable: If the file exists but cannot be opened or read.
    """
    try:
        with open(path, encoding="utf-8") as file:
            contents = file.read()
    except FileNotFoundError:
        logger.debug("No sessions file at %s, starting empty", path)
        return []
    except UnicodeDecodeError as exc:
        raise CorruptStore(f"Invalid UTF-8 in {path}: {exc}", path=path) from exc
    except OSError as exc:
        raise StorageUnavailable(f"Cannot read {path}: {exc}") from exc

    if not contents.strip():
        return []

    try:
        data = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise CorruptStore(f"JSON error in {path}: {exc}", path=path) from exc

    if not isinstance(data, list):
        raise CorruptStore(f"Expected a JSON array in {path}, got {type(data).__name__}", path=path)

    sessions: List[Session] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CorruptStore(f"Entry {index} in {path} is not an object", path=path)
        try:
            sessions.append(Session.from_dict(entry))
        except KeyError as exc:
            raise CorruptStore(f"Entry {index} in {path} is missing field {exc}", path=path) from exc
        except (TypeError, ValueError) as exc:
            raise CorruptStore(f"Entry {index} in {path} is invalid: {exc}", path=path) from exc

    logger.debug("Loaded %d sessions from %s", len(sessions), path)
    return sessions


def save_sessions(path: Path, sessions: Sequence[Session]) -> None:
    """Overwrite sessions.json with the given sessions as pretty-printed JSON.

    Raises:
        WriteFailure: If serialization or any file operation fails.
    """
    tmp_path = path.with_name(path.name + ".tmp")

    try:
        contents = json.dumps([s.to_dict() for s in sessions], indent=2, ensure_ascii=False)
    except (TypeError, ValueError, AttributeError) as exc:
        raise WriteFailure(f"Cannot serialize sessions: {exc}", path=path) from exc

    try:
        with open(tmp_path, "w", encoding="utf-8") as tmp_file:
            tmp_file.write(contents)
            tmp_file.write("\n")
        os.replace(tmp_path, path)
    except OSError as exc:
        # Original file is untouched; only the temp file needs cleanup
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_exc:
            logger.warning("Could not remove %s: %s", tmp_path, cleanup_exc)
        raise WriteFailure(f"Failed to write {path}: {exc}", path=path) from exc

    logger.debug("Saved %d sessions to %s", len(sessions), path)


def append_session(path: Path, session: Session) -> List[Session]:
    """Load the collection, append one session and save it back.

    Returns the saved collection. Nothing is written if loading fails.
    """
    sessions = load_sessions(path)
    sessions.append(session)
    save_sessions(path, sessions)
    return sessions
