from l10nstatus.diff import diff


def test_scenario_from_report():
    delta = diff({"a": "1", "b": "2", "c": "3"}, {"a": "1", "b": "9"})

    assert delta.missing == {"c"}
    assert delta.additional == set()
    assert delta.non_translated == {"a"}
    assert delta.translated_count == 1
    assert delta.values == {"a": "1"}
    assert not delta.is_ok


def test_set_properties():
    base = {"a": "x", "b": "y", "c": "z", "d": "same"}
    candidate = {"b": "Y", "d": "same", "e": "new", "f": "new"}

    delta = diff(base, candidate)

    assert not delta.missing & delta.additional
    assert delta.missing <= set(base)
    assert delta.additional <= set(candidate)
    assert delta.missing == {"a", "c"}
    assert delta.additional == {"e", "f"}
    assert delta.translated_count == len(base) - len(delta.missing) - len(delta.non_translated)
    assert delta.translated_count >= 0


def test_coincidental_equality_is_non_translated():
    delta = diff({"brand": "Acme", "ok": "OK"}, {"brand": "Acme", "ok": "D'accord"})

    assert delta.non_translated == {"brand"}


def test_missing_keys_are_not_compared():
    delta = diff({"a": ""}, {})

    assert delta.missing == {"a"}
    assert delta.non_translated == set()
    assert delta.translated_count == 0


def test_identical_bundles_and_idempotence():
    base = {"a": "1", "b": "2"}
    candidate = {"a": "eins", "b": "zwei"}

    first = diff(base, candidate)
    second = diff(base, candidate)

    assert first == second
    assert first.is_ok
    assert first.translated_count == 2


def test_empty_bundles():
    delta = diff({}, {})

    assert delta.is_ok
    assert delta.translated_count == 0
