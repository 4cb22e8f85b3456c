"""Projections of analysis results onto Blueprint models.

Both adapters copy fields verbatim and never validate: an empty name in gives
an empty name out.
"""

from typing import TYPE_CHECKING

from octo.models import Blueprint

if TYPE_CHECKING:
    from octo.analysis import Analysis, ProjectInfo


def from_analysis(analysis: "Analysis") -> Blueprint:
    """Build a blueprint from a minimal analysis; only the name is known."""
    return Blueprint(name=analysis.name)


def from_project_info(info: "ProjectInfo") -> Blueprint:
    """
    Build a blueprint from a full analysis.

    Environment variables and thermal settings are not part of the analysis and
    are left at their defaults.

    Args:
        info: Any object exposing the ProjectInfo attributes.

    Returns:
        A Blueprint carrying the analysis fields unchanged.
    """
    return Blueprint(
        name=info.name,
        language=info.language,
        version=info.version,
        run_command=info.run_command,
        setup_command=info.setup_command,
        setup_required=info.setup_required,
        package_manager=info.package_manager,
        is_monorepo=info.is_monorepo,
        monorepo_root=info.monorepo_root,
    )
