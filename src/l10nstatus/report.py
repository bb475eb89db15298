import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from l10nstatus import resolver
from l10nstatus.aggregate import AggregationTable, summary_cell
from l10nstatus.bundles import DEFAULT_ENCODING, load_bundle
from l10nstatus.classes import (
    BundleFamily,
    FamilyRow,
    LocaleResult,
    ProjectHeader,
    ResourceEntry,
)
from l10nstatus.diff import diff
from l10nstatus.errors import BundleLoadError
from l10nstatus.sinks import Cell, Sink

logger = logging.getLogger(__name__)


@dataclass
class ReportModel:
    locales: list[str]
    table: AggregationTable
    rows: list[FamilyRow | ProjectHeader] = field(default_factory=list)

    @property
    def families(self) -> list[FamilyRow]:
        return [row for row in self.rows if isinstance(row, FamilyRow)]


def locale_anchor(locale: str) -> str:
    return f"l10n-{locale}"


def _compare_family(
    family: BundleFamily,
    locales: Sequence[str],
    table: AggregationTable,
    encoding: str,
) -> FamilyRow:
    try:
        base = load_bundle(family.base.location, encoding)
    except BundleLoadError as ex:
        logger.error(str(ex))
        results = [LocaleResult(locale, error=str(ex)) for locale in locales]
        return FamilyRow(family.base, 0, results, error=str(ex))

    table.add_base(len(base))
    results = []
    for index, locale in enumerate(locales, start=1):
        result = LocaleResult(locale)
        candidate_path = family.variants.get(locale)
        if candidate_path is not None:
            try:
                result.delta = diff(base, load_bundle(candidate_path, encoding))
            except BundleLoadError as ex:
                logger.error(str(ex))
                result.error = str(ex)
        table.fold(result.delta, index)
        results.append(result)
    return FamilyRow(family.base, len(base), results)


def build_report(
    entries: Sequence[ResourceEntry],
    locales: Sequence[str] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> ReportModel:
    """Compare every bundle family against the watched locales in one pass.

    Entries must be in canonical order. When they span more than one project
    a ProjectHeader precedes the first family of each project.
    """
    locales = list(locales or [])
    model = ReportModel(locales, AggregationTable(len(locales)))
    multi_project = len({entry.group for entry in entries}) > 1

    last_group = None
    for family in resolver.resolve(entries, locales):
        if multi_project and family.base.group != last_group:
            last_group = family.base.group
            model.rows.append(ProjectHeader(last_group))
        logger.debug(f"Comparing {family.base.path}")
        model.rows.append(_compare_family(family, locales, model.table, encoding))

    logger.info(
        f"Compared {len(model.families)} bundles against {len(locales)} locales"
    )
    return model


def _key_count_cell(row: FamilyRow, messages: dict[str, str]) -> str:
    if row.error is not None:
        return f"{row.key_count} ({messages['report.l10n.error']})"
    return str(row.key_count)


def _totals_row(model: ReportModel, messages: dict[str, str]) -> list[Cell]:
    cells: list[Cell] = [messages["report.l10n.total"], str(model.table.count[0])]
    for count, percentage in model.table.totals():
        if percentage is None:
            cells.append(str(count))
        else:
            cells.append(f"{count} ({percentage} %)")
    return cells


def _detail_row(row: FamilyRow, index: int, messages: dict[str, str]) -> list[Cell]:
    result = row.results[index]
    if result.error is not None:
        return [row.entry.path, messages["report.l10n.error"], "", ""]
    if result.delta is None:
        return [row.entry.path, messages["report.l10n.missingFile"], "", ""]
    delta = result.delta
    if delta.is_ok:
        return [row.entry.path, messages["report.l10n.ok"], "", ""]
    return [
        row.entry.path,
        sorted(delta.missing),
        sorted(delta.additional),
        [f"{key} = {delta.values[key]}" for key in sorted(delta.non_translated)],
    ]


def _render_detail(
    model: ReportModel, index: int, sink: Sink, messages: dict[str, str]
) -> None:
    locale = model.locales[index]
    sink.section(
        messages["report.l10n.detail.title"].format(locale), locale_anchor(locale)
    )
    sink.table_start()
    sink.table_header(
        [
            messages["report.l10n.column.path"],
            messages["report.l10n.column.missing"],
            messages["report.l10n.column.additional"],
            messages["report.l10n.column.nontranslated"],
        ]
    )
    for row in model.rows:
        if isinstance(row, ProjectHeader):
            sink.group_row(row.name)
        else:
            sink.table_row(_detail_row(row, index, messages))
    sink.table_end()
    sink.section_end()


def render(model: ReportModel, sink: Sink, messages: dict[str, str]) -> None:
    sink.section(messages["report.l10n.title"])
    sink.paragraph(messages["report.l10n.intro"])

    if model.locales:
        sink.paragraph(messages["report.l10n.index"])
        sink.list_start()
        for locale in model.locales:
            sink.link_item(
                locale_anchor(locale),
                messages["report.l10n.detail.title"].format(locale),
            )
        sink.list_end()

    sink.table_start(messages["report.l10n.summary.caption"])
    sink.table_header(
        [
            messages["report.l10n.column.path"],
            messages["report.l10n.column.default"],
            *model.locales,
        ]
    )
    for row in model.rows:
        if isinstance(row, ProjectHeader):
            sink.group_row(row.name)
            continue
        cells: list[Cell] = [row.entry.path, _key_count_cell(row, messages)]
        cells.extend(summary_cell(result, messages) for result in row.results)
        sink.table_row(cells)
    sink.table_row(_totals_row(model, messages))
    sink.table_end()

    sink.paragraph(messages["report.l10n.legend"])
    sink.list_start()
    for item in ("report.l10n.list1", "report.l10n.list2", "report.l10n.list3"):
        sink.list_item(messages[item])
    sink.list_end()
    sink.paragraph(messages["report.l10n.note"])

    for index in range(len(model.locales)):
        _render_detail(model, index, sink, messages)

    sink.section_end()
