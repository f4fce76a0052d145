"""Regex-level helpers for ``AndroidManifest.xml`` and target identifiers.

The manifest is never parsed as XML. Only the first ``<activity>``
declaration's ``android:name`` attribute and the legacy debuggable flag
are of interest, and both are located with patterns.
"""

from __future__ import annotations

import re

ACTIVITY_NAME_PATTERN = re.compile(r'<activity[\s\S]*?android:name\s*=\s*"(.*?)"', re.IGNORECASE)

# Attribute removed from generated manifests in Cordova 4.4 (CB-5447).
DEBUGGABLE_ATTRIBUTE_PATTERN = re.compile(r'\s*android:debuggable="true"')


def find_activity_name(manifest_text: str) -> str | None:
    """Return the ``android:name`` of the first ``<activity>``, or None."""
    match = ACTIVITY_NAME_PATTERN.search(manifest_text)
    if match is None:
        return None
    return match.group(1)


def api_level(target: str) -> str:
    """Extract the numeric API level from a target such as ``android-19``.

    Raises:
        ValueError: If *target* has no ``-`` separated second component.
    """
    parts = target.split("-")
    if len(parts) < 2 or not parts[1]:
        msg = f"Cannot extract an API level from target {target!r}"
        raise ValueError(msg)
    return parts[1]
