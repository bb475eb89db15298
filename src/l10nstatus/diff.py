from collections.abc import Mapping

from l10nstatus.classes import LocaleDelta


def diff(base: Mapping[str, str], candidate: Mapping[str, str]) -> LocaleDelta:
    """Compare a base bundle with one locale bundle.

    A key whose value is the same in both bundles counts as not translated,
    even when the equality is legitimate (numbers, brand names).
    """
    base_keys = base.keys()
    candidate_keys = candidate.keys()
    missing = frozenset(base_keys - candidate_keys)
    additional = frozenset(candidate_keys - base_keys)

    values = {}
    for key in base_keys & candidate_keys:
        if base[key] == candidate[key]:
            values[key] = base[key]

    return LocaleDelta(
        missing=missing,
        additional=additional,
        non_translated=frozenset(values),
        base_size=len(base),
        values=values,
    )
