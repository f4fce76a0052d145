"""Plugin system — pluggy hook specifications and plugin discovery.

Plugins are installed packages exposing an entry point in the
``cordova_android.plugins`` group.
"""

from __future__ import annotations

import pluggy

hookimpl = pluggy.HookimplMarker("cordova_android")
