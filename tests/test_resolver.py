from l10nstatus.classes import ResourceEntry
from l10nstatus.resolver import is_base, is_variant, resolve, variant_filename


def test_classification():
    assert is_variant("messages_de.properties")
    assert is_variant("messages_de_CH.properties")
    assert is_variant("messages_DE.properties")
    assert not is_variant("messages_deX.properties")
    assert not is_variant("messages.properties")
    assert is_base("messages.properties")
    assert is_base("messages_deX.properties")
    assert not is_base("messages_de.properties")
    assert not is_base("messages.txt")


def test_variant_filename():
    assert variant_filename("app.properties", "de") == "app_de.properties"
    assert variant_filename("app.properties", "pt_BR") == "app_pt_BR.properties"


def test_resolve_only_watched_locales(tmp_path, bundle_writer):
    base = bundle_writer(tmp_path / "app.properties", {"a": "1"})
    de = bundle_writer(tmp_path / "app_de.properties", {"a": "eins"})
    bundle_writer(tmp_path / "app_it.properties", {"a": "uno"})

    entries = [
        ResourceEntry("app.properties", base, "p"),
        ResourceEntry("app_de.properties", de, "p"),
        ResourceEntry("app_it.properties", tmp_path / "app_it.properties", "p"),
    ]
    families = resolve(entries, ["de", "fr"])

    assert len(families) == 1
    assert families[0].base.location == base
    assert families[0].variants == {"de": de, "fr": None}


def test_resolve_keeps_entry_order_and_handles_no_locales(tmp_path, bundle_writer):
    b = bundle_writer(tmp_path / "b.properties", {})
    a = bundle_writer(tmp_path / "sub" / "a.properties", {})
    entries = [ResourceEntry("b.properties", b, "p"), ResourceEntry("sub/a.properties", a, "p")]

    families = resolve(entries, None)

    assert [f.base.path for f in families] == ["b.properties", "sub/a.properties"]
    assert families[0].variants == {}

