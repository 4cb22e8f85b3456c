import pytest

from octo.analysis import Analysis, ProjectInfo
from octo.models import Blueprint, EnvVar, ThermalConfig


@pytest.fixture
def sample_blueprint():
    """A blueprint carrying only the fields a simple Go project needs."""
    return Blueprint(name="octo-sample", language="go", run_command="go run .")


@pytest.fixture
def full_blueprint():
    """A blueprint with every field set to a non-default value."""
    return Blueprint(
        name="octo-sample",
        language="Node",
        version="20.11.0",
        run_command="pnpm dev",
        setup_command="pnpm install",
        setup_required=True,
        package_manager="pnpm",
        is_monorepo=True,
        monorepo_root="apps/web",
        env_vars=[
            EnvVar(name="DATABASE_URL", required=True),
            EnvVar(name="DEBUG", required=False),
        ],
        thermal=ThermalConfig(concurrency=2, batch_size=4, cool_down_ms=500, mode="cool"),
    )


@pytest.fixture
def full_blueprint_text():
    """Current-schema rendering of the full_blueprint fixture."""
    return (
        'name: "octo-sample"\n'
        "language: Node\n"
        "version: 20.11.0\n"
        "run: pnpm dev\n"
        "setup: pnpm install\n"
        "setup_required: true\n"
        "package_manager: pnpm\n"
        "is_monorepo: true\n"
        "monorepo_root: apps/web\n"
        "env_vars:\n"
        "  - name: DATABASE_URL\n"
        "    required: true\n"
        "  - name: DEBUG\n"
        "    required: false\n"
        "thermal:\n"
        "  concurrency: 2\n"
        "  batch_size: 4\n"
        "  cool_down_ms: 500\n"
        "  mode: cool\n"
    )


@pytest.fixture
def basic_analysis():
    return Analysis(name="foo", root="/work/foo")


@pytest.fixture
def project_info():
    """A fully populated analysis result for a pnpm workspace."""
    return ProjectInfo(
        name="storefront",
        language="Node",
        version="20.11.0",
        run_command="pnpm --filter web dev",
        setup_command="pnpm install",
        setup_required=True,
        package_manager="pnpm",
        is_monorepo=True,
        monorepo_root="/work/storefront",
    )


@pytest.fixture
def blueprint_file(tmp_path):
    """Path for a blueprint file inside a throwaway project directory."""
    return tmp_path / ".octo.yaml"
