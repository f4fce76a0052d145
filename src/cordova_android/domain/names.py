"""Package identifier and project name rules.

Both predicates return ``None`` when the value is acceptable and raise
:class:`InputValidationError` otherwise. The error ``code`` names the
rule that failed so callers can branch without parsing messages.
"""

from __future__ import annotations

import re

from cordova_android.domain.errors import InputValidationError

# Java package shape; underscores allowed after the first character of a segment.
PACKAGE_NAME_PATTERN = re.compile(r"^[a-zA-Z]+(\.[a-zA-Z0-9][a-zA-Z0-9_]*)+$")
_RESERVED_CLASS_WORD = re.compile(r"\bclass\b", re.IGNORECASE)

# Name of the activity base class shipped in the framework.
RESERVED_PROJECT_NAME = "CordovaActivity"


def validate_package_name(package_name: str) -> None:
    """Check that *package_name* is usable as an Android package.

    Segments after the first may start with a digit. The word ``class``
    is rejected anywhere since it cannot appear in a Java package.
    """
    if not PACKAGE_NAME_PATTERN.fullmatch(package_name):
        raise InputValidationError(
            "Package name must look like: com.company.Name",
            code="INVALID_FORMAT",
            detail={"package_name": package_name},
        )

    if _RESERVED_CLASS_WORD.search(package_name):
        raise InputValidationError(
            "class is a reserved word",
            code="RESERVED_WORD",
            detail={"package_name": package_name},
        )


def validate_project_name(project_name: str) -> None:
    """Check that *project_name* is usable as a Java class name."""
    if project_name == "":
        raise InputValidationError("Project name cannot be empty", code="EMPTY")

    if project_name == RESERVED_PROJECT_NAME:
        raise InputValidationError(
            f"Project name cannot be {RESERVED_PROJECT_NAME}",
            code="RESERVED_NAME",
            detail={"project_name": project_name},
        )

    # Java classes don't begin with digits
    if project_name[0] in "0123456789":
        raise InputValidationError(
            "Project name must not begin with a number",
            code="INVALID_START",
            detail={"project_name": project_name},
        )
