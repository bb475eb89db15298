import pytest

from l10nstatus.bundles import load_bundle, store_bundle
from l10nstatus.errors import BundleLoadError


def test_load_properties_syntax(tmp_path):
    path = tmp_path / "app.properties"
    path.write_text(
        "# comment\n"
        "! other comment\n"
        "greeting = Hello\n"
        "colon: value\n"
        "multi = first \\\n"
        "    second\n"
        "escaped = caf\\u00e9\n"
        "dup = one\n"
        "dup = two\n",
        encoding="iso-8859-1",
    )

    bundle = load_bundle(path)

    assert bundle["greeting"] == "Hello"
    assert bundle["colon"] == "value"
    assert bundle["multi"] == "first second"
    assert bundle["escaped"] == "café"
    assert bundle["dup"] == "two"
    assert len(bundle) == 5


def test_missing_file_raises_bundle_load_error(tmp_path):
    with pytest.raises(BundleLoadError) as info:
        load_bundle(tmp_path / "missing.properties")

    assert "missing.properties" in str(info.value)


def test_store_and_reload_non_latin_values(tmp_path):
    path = tmp_path / "out.properties"

    store_bundle(path, {"key": "XXX 什么 value"}, comment="generated")

    content = path.read_text(encoding="iso-8859-1")
    assert "generated" in content
    assert load_bundle(path) == {"key": "XXX 什么 value"}
