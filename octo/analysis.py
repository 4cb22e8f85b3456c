"""
Result shapes handed over by project analysis.

Analysis itself (detecting language, framework and package manager) happens
elsewhere; these models only describe what it produces. They are plain
pydantic models rather than OctoBaseModel subclasses because they are never
persisted: an input adapter projects them onto a Blueprint and drops them.
"""

from pydantic import BaseModel, ConfigDict


class Analysis(BaseModel):
    """Minimal analysis: the analyzed directory and the project name derived from it."""

    model_config = ConfigDict(frozen=True)

    name: str
    root: str = ""


class ProjectInfo(BaseModel):
    """
    Full analysis of a project.

    `monorepo_root` is only meaningful when `is_monorepo` is set.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    language: str = ""
    version: str = ""
    run_command: str = ""
    setup_command: str = ""
    setup_required: bool = False
    package_manager: str = ""
    is_monorepo: bool = False
    monorepo_root: str = ""
