"""cordova-android — create and update Android projects from the platform template."""

__version__ = "0.1.0"
