"""Tests for configuration path resolution helpers."""

from pathlib import Path

from pathname.config.paths import (
    _detect_project_root,  # pyright: ignore[reportPrivateUsage]
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(project_root: Path) -> None:
    """Default log locations should live under the project logs/ folder."""

    expected_dir = project_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "pathname.log"


def test_default_config_path_under_project_root(project_root: Path) -> None:
    """Without an override the config file sits in <root>/config/."""

    assert default_config_path() == project_root / "config" / "pathname.toml"


def test_default_config_path_honours_environment(project_root: Path, tmp_path: Path) -> None:
    """PATHNAME_CONFIG replaces the project-root default."""

    _ = project_root
    custom = tmp_path / "elsewhere" / "custom.toml"
    env = {"PATHNAME_CONFIG": f"  {custom}  "}
    assert default_config_path(env) == custom


def test_resolve_overridable_path_prefers_explicit(tmp_path: Path) -> None:
    """An explicit path wins over the environment and the default."""

    explicit = tmp_path / "explicit.toml"
    resolved = resolve_overridable_path(
        explicit_path=str(explicit),
        env={"PATHNAME_CONFIG": str(tmp_path / "env.toml")},
        env_var="PATHNAME_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == explicit


def test_resolve_overridable_path_ignores_blank_environment(tmp_path: Path) -> None:
    """Whitespace-only environment values fall through to the default."""

    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"PATHNAME_CONFIG": "   "},
        env_var="PATHNAME_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == tmp_path / "default.toml"


def test_detect_project_root_walks_up_to_marker(tmp_path: Path) -> None:
    """The closest ancestor holding a marker is the project root."""

    (tmp_path / ".git").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert _detect_project_root(nested) == tmp_path.resolve()
