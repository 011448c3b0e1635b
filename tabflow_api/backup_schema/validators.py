"""
Per-entity validators for the backup document shape.

    BackupDocument { version, timestamp, sessions: [Session] }
    Session        { id, name, createdAt, groups: [Group] }
    Group          { id, name, tabs: [TabSnapshot] }
    TabSnapshot    { title, url, domain, favicon, lastAccessed }

Each predicate checks its own fields and then delegates to the predicate one
level down, so recursion depth is fixed at document -> session -> group -> tab
no matter how deeply the input nests. Each stops at the first failure.

Only the name of the failing field is logged (DEBUG), never its value.
"""

from __future__ import annotations

import logging
from typing import Any

from .guards import is_array, is_integer, is_number, is_object, is_string, is_supported_version
from .session_name import validate_session_name

logger = logging.getLogger(__name__)

_TAB_STRING_FIELDS = ("title", "url", "domain", "favicon")


def _reject(entity: str, field: str) -> bool:
    logger.debug("%s rejected: invalid %s", entity, field)
    return False


def is_tab_snapshot(data: Any) -> bool:
    if not is_object(data):
        return _reject("Tab", "object")
    for name in _TAB_STRING_FIELDS:
        if not is_string(data.get(name)):
            return _reject("Tab", name)
    if not is_number(data.get("lastAccessed")):
        return _reject("Tab", "lastAccessed")
    return True


def is_group(data: Any) -> bool:
    if not is_object(data):
        return _reject("Group", "object")
    if not is_string(data.get("id")):
        return _reject("Group", "id")
    if not is_string(data.get("name")):
        return _reject("Group", "name")
    tabs = data.get("tabs")
    if not is_array(tabs):
        return _reject("Group", "tabs")
    return all(is_tab_snapshot(tab) for tab in tabs)


def is_session(data: Any) -> bool:
    if not is_object(data):
        return _reject("Session", "object")
    if not is_string(data.get("id")):
        return _reject("Session", "id")
    if not validate_session_name(data.get("name")).valid:
        return _reject("Session", "name")
    if not is_integer(data.get("createdAt")):
        return _reject("Session", "createdAt")
    groups = data.get("groups")
    if not is_array(groups):
        return _reject("Session", "groups")
    return all(is_group(group) for group in groups)


def is_backup_document(data: Any) -> bool:
    """Fast accept/reject check for an imported or synced backup."""
    if not is_object(data):
        return _reject("Backup", "object")
    if not is_supported_version(data.get("version")):
        return _reject("Backup", "version")
    if not is_string(data.get("timestamp")):
        return _reject("Backup", "timestamp")
    sessions = data.get("sessions")
    if not is_array(sessions):
        return _reject("Backup", "sessions")
    return all(is_session(session) for session in sessions)
