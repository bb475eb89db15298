from l10nstatus.classes import LocaleDelta, LocaleResult


class AggregationTable:
    """Running key totals of a report.

    count[0] holds the number of base keys over all families, count[i] the
    number of translated keys for the i-th watched locale.
    """

    def __init__(self, locale_count: int):
        self.count = [0] * (locale_count + 1)

    def add_base(self, size: int) -> None:
        self.count[0] += size

    def fold(self, delta: LocaleDelta | None, locale_index: int) -> None:
        if not 1 <= locale_index < len(self.count):
            raise IndexError(f"Locale index {locale_index} out of range")
        if delta is not None:
            self.count[locale_index] += delta.translated_count

    def percentage(self, locale_index: int) -> int | None:
        if self.count[0] == 0:
            return None
        return self.count[locale_index] * 100 // self.count[0]

    def totals(self) -> list[tuple[int, int | None]]:
        return [(self.count[i], self.percentage(i)) for i in range(1, len(self.count))]


def delta_lines(
    delta: LocaleDelta, messages: dict[str, str]
) -> list[tuple[str, int]]:
    lines = []
    if delta.missing:
        lines.append((messages["report.l10n.missingKey"], len(delta.missing)))
    if delta.additional:
        lines.append((messages["report.l10n.additional"], len(delta.additional)))
    if delta.non_translated:
        lines.append(
            (messages["report.l10n.nontranslated"], len(delta.non_translated))
        )
    return lines


def summary_cell(
    result: LocaleResult, messages: dict[str, str]
) -> str | list[tuple[str, int]]:
    """Text of one locale cell in the summary table; empty categories are left out."""
    if result.error is not None:
        return messages["report.l10n.error"]
    if result.delta is None:
        return messages["report.l10n.missingFile"]
    if result.delta.is_ok:
        return messages["report.l10n.ok"]
    return delta_lines(result.delta, messages)
