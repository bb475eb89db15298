import pytest

from l10nstatus.config import load_config, parse_projects
from l10nstatus.errors import ConfigurationError


def test_missing_config_uses_defaults(tmp_path):
    assert load_config(str(tmp_path)) == {}


def test_malformed_yaml_is_fatal(tmp_path):
    (tmp_path / "config.yml").write_text("report: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path))


def test_parse_projects():
    projects = parse_projects(
        {
            "projects": [
                {
                    "name": "core",
                    "resources": [
                        "core/res",
                        {"directory": "core/more", "excludes": ["**/test_*.properties"]},
                    ],
                },
                {"resources": []},
            ]
        }
    )

    assert [p.name for p in projects] == ["core", "project-2"]
    first, second = projects[0].resources
    assert first.directory == "core/res"
    assert first.includes == ["**/*.properties"]
    assert second.excludes == ["**/test_*.properties"]


def test_resource_without_directory_is_rejected():
    with pytest.raises(ConfigurationError):
        parse_projects({"projects": [{"name": "x", "resources": [{"includes": []}]}]})
