"""ProjectService — create a new Android project or update an existing one.

Create pipeline:
  NORMALIZE → EXISTS? → VALIDATE → REQUIREMENTS → MATERIALIZE → LINK → REPORT

Update pipeline:
  REQUIREMENTS → READ MANIFEST → RECOPY → STRIP DEBUGGABLE → LINK → REPORT

Every gate before MATERIALIZE is free of filesystem writes. Once writing
starts, the first failure aborts the run and leaves the partial tree in
place for the caller to inspect or delete.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from cordova_android.config.models import ProjectConfig, SdkConfig
from cordova_android.domain.errors import (
    EnvironmentCheckError,
    ManifestParseError,
    PreconditionError,
    ProjectError,
)
from cordova_android.domain.manifest import (
    DEBUGGABLE_ATTRIBUTE_PATTERN,
    api_level,
    find_activity_name,
)
from cordova_android.domain.names import validate_package_name, validate_project_name
from cordova_android.domain.project import ProjectRequest
from cordova_android.infrastructure.filesystem import FileSystem
from cordova_android.infrastructure.sdk import ProjectLinker, Requirements, SdkRequirements
from cordova_android.infrastructure.templates import TemplateCopier
from cordova_android.services.base import BaseService
from cordova_android.services.result import ServiceResult
from cordova_android.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from cordova_android.config.settings import AndroidSettings
    from cordova_android.infrastructure.layout import PlatformLayout
    from cordova_android.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

_WHERE_IS_WWW_NOTE = (
    "To show `assets/www` or `res/xml/config.xml`, go to:\n"
    "    Project -> Properties -> Resource -> Resource Filters\n"
    "And delete the exclusion filter.\n"
)

LIBRARY_IMPORT_HINT = (
    "If you updated from a pre-3.2.0 version and use an IDE, "
    'we now require that you import the "CordovaLib" library project.'
)


class ProjectService(BaseService):
    """Creates and updates projects from the platform at ``layout.root``."""

    def __init__(
        self,
        layout: PlatformLayout,
        *,
        requirements: Requirements | None = None,
        linker: ProjectLinker | None = None,
        fs: FileSystem | None = None,
        sdk: SdkConfig | None = None,
        defaults: ProjectConfig | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        super().__init__(layout, plugins=plugins)
        sdk = sdk or SdkConfig()
        self._fs = fs or FileSystem()
        self._copier = TemplateCopier(layout, self._fs)
        self._requirements: Requirements = requirements or SdkRequirements(
            layout,
            android_command=sdk.android_command,
            java_command=sdk.java_command,
            ant_command=sdk.ant_command,
        )
        self._linker = linker or ProjectLinker(layout, android_command=sdk.android_command)
        self._defaults = defaults or ProjectConfig()

    @classmethod
    def from_settings(
        cls,
        settings: AndroidSettings,
        layout: PlatformLayout,
        *,
        plugins: PluginManager | None = None,
    ) -> ProjectService:
        return cls(layout, sdk=settings.sdk, defaults=settings.project, plugins=plugins)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def build_request(
        self,
        project_path: str | Path | None = None,
        package_name: str | None = None,
        project_name: str | None = None,
        *,
        template_dir: str | Path | None = None,
        shared: bool = False,
        cli_template: bool = False,
    ) -> ProjectRequest:
        """Fill omitted create arguments with the configured defaults."""
        defaults = self._defaults
        if project_path is None:
            project_path = defaults.default_path
        if package_name is None:
            package_name = defaults.default_package
        if project_name is None:
            project_name = defaults.default_name
        if template_dir is None:
            template_dir = self._layout.project_template_dir

        return ProjectRequest(
            project_path=Path(project_path),
            package_name=package_name,
            project_name=project_name,
            template_dir=Path(template_dir),
            shared=shared,
            cli_template=cli_template,
        )

    @traced
    def create_project(
        self,
        project_path: str | Path | None = None,
        package_name: str | None = None,
        project_name: str | None = None,
        *,
        template_dir: str | Path | None = None,
        shared: bool = False,
        cli_template: bool = False,
    ) -> ServiceResult:
        """Create a new project tree and link it against the SDK target."""
        op = "create_project"
        request = self.build_request(
            project_path,
            package_name,
            project_name,
            template_dir=template_dir,
            shared=shared,
            cli_template=cli_template,
        )

        try:
            version = self._layout.version()
            if request.project_path.exists():
                msg = "Project already exists! Delete and recreate"
                raise PreconditionError(msg, detail={"path": str(request.project_path)})

            validate_package_name(request.package_name)
            validate_project_name(request.project_name)

            target = self._check_requirements()
            api = self._api_level(target)

            logger.info(
                "Creating Cordova project for the Android platform: "
                "path=%s package=%s name=%s target=%s",
                request.project_path,
                request.package_name,
                request.project_name,
                target,
            )
            with trace_span("materialize") as span:
                self._materialize(request, api)
                if span:
                    span.annotate("shared", request.shared)
            with trace_span("link"):
                self._linker.link(request.project_path, target, shared=request.shared)
        except ProjectError as exc:
            return self._failure(op, exc)

        logger.info("Project successfully created.")
        warnings: list[str] = []
        self._dispatch_event(
            "post_create",
            {
                "project_path": str(request.project_path),
                "package_name": request.package_name,
                "project_name": request.project_name,
                "target": target,
            },
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(request.project_path),
                "package": request.package_name,
                "name": request.project_name,
                "activity": request.activity_name,
                "target": target,
                "shared": request.shared,
                "version": version,
            },
            warnings=warnings,
        )

    def _materialize(self, request: ProjectRequest, api: str) -> None:
        """Copy the template into the (new) project path and customize it."""
        fs = self._fs
        template = request.template_dir
        project = request.project_path
        activity = request.activity_name

        logger.info("Copying template files...")
        fs.copy_tree(template / "assets", project / "assets")
        fs.copy_tree(template / "res", project / "res")
        fs.copy_tree(self._layout.framework_dir / "res" / "xml", project / "res" / "xml")

        # Version control drops empty directories, so libs/ is not in the template.
        fs.mkdir(project / "libs")

        if request.cli_template:
            fs.copy_file(template / "eclipse-project-CLI", project / ".project")
            fs.write_text(project / "assets" / "_where-is-www.txt", _WHERE_IS_WWW_NOTE)
        else:
            fs.copy_file(template / "eclipse-project", project / ".project")

        self._copier.copy_js_and_library(project, shared=request.shared, project_name=activity)

        fs.mkdir(request.activity_dir)
        fs.copy_file(template / "Activity.java", request.activity_path)
        fs.replace_token(request.activity_path, "__ACTIVITY__", activity)
        fs.replace_token(project / "res" / "values" / "strings.xml", "__NAME__", request.project_name)
        fs.replace_token(project / ".project", "__NAME__", request.project_name)
        fs.replace_token(request.activity_path, "__ID__", request.package_name)

        fs.copy_file(template / "AndroidManifest.xml", request.manifest_path)
        fs.replace_token(request.manifest_path, "__ACTIVITY__", activity)
        fs.replace_token(request.manifest_path, "__PACKAGE__", request.package_name)
        fs.replace_token(request.manifest_path, "__APILEVEL__", api)

        self._copier.copy_scripts(project)
        self._copier.copy_ant_rules(project)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    @traced
    def update_project(self, project_path: str | Path) -> ServiceResult:
        """Refresh framework, scripts, and build rules of an existing project."""
        op = "update_project"
        project = Path(project_path)

        try:
            version = self._layout.version()
            target = self._check_requirements()
            project_name = self.extract_project_name(project)

            with trace_span("recopy"):
                self._copier.copy_js_and_library(project, shared=False, project_name=project_name)
                self._copier.copy_scripts(project)
                self._copier.copy_ant_rules(project)
            self.remove_debuggable(project)
            with trace_span("link"):
                self._linker.link(project, target, shared=False)
        except ProjectError as exc:
            return self._failure(op, exc)

        logger.info("Android project is now at version %s", version)
        warnings: list[str] = []
        self._dispatch_event(
            "post_update",
            {"project_path": str(project), "project_name": project_name, "version": version},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(project),
                "name": project_name,
                "target": target,
                "version": version,
                "hint": LIBRARY_IMPORT_HINT,
            },
            warnings=warnings,
        )

    def extract_project_name(self, project_path: Path) -> str:
        """Return the first activity name declared in the project's manifest."""
        manifest_path = project_path / "AndroidManifest.xml"
        if not manifest_path.is_file():
            msg = f"No AndroidManifest.xml found in {project_path}"
            raise ManifestParseError(msg, detail={"path": str(manifest_path)})

        name = find_activity_name(self._fs.read_text(manifest_path))
        if name is None:
            msg = f"Could not find activity name in {manifest_path}"
            raise ManifestParseError(msg, detail={"path": str(manifest_path)})
        return name

    def remove_debuggable(self, project_path: Path) -> None:
        """Drop the ``android:debuggable="true"`` attribute if present."""
        self._fs.substitute(project_path / "AndroidManifest.xml", DEBUGGABLE_ATTRIBUTE_PATTERN, "")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_requirements(self) -> str:
        """Run the environment check, then return the target it resolves."""
        with trace_span("requirements"):
            self._requirements.run()
            return self._requirements.get_target()

    @staticmethod
    def _api_level(target: str) -> str:
        try:
            return api_level(target)
        except ValueError as exc:
            raise EnvironmentCheckError(str(exc), detail={"target": target}) from exc
