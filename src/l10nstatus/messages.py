from collections.abc import Mapping

DEFAULT_MESSAGES = {
    "report.l10n.name": "L10n Status",
    "report.l10n.description": "Status of localization of resource bundles.",
    "report.l10n.title": "Localization Status Report",
    "report.l10n.intro": (
        "The report lists all resource bundle files with the number of keys "
        "in the default locale and the localization status for each watched locale."
    ),
    "report.l10n.index": "Locale details",
    "report.l10n.summary.caption": "Summary",
    "report.l10n.column.path": "Path",
    "report.l10n.column.default": "Default locale",
    "report.l10n.column.missing": "Missing keys",
    "report.l10n.column.additional": "Additional keys",
    "report.l10n.column.nontranslated": "Non-translated keys",
    "report.l10n.missingFile": "file missing",
    "report.l10n.missingKey": "Missing",
    "report.l10n.additional": "Additional",
    "report.l10n.nontranslated": "Non-translated",
    "report.l10n.ok": "OK",
    "report.l10n.error": "error",
    "report.l10n.total": "Total",
    "report.l10n.detail.title": "Locale {0}",
    "report.l10n.legend": "Legend:",
    "report.l10n.list1": "Missing: keys present in the default bundle but not in the localized one.",
    "report.l10n.list2": "Additional: keys present in the localized bundle but not in the default one.",
    "report.l10n.list3": "Non-translated: keys whose localized value equals the default value.",
    "report.l10n.note": (
        "Non-translated keys are detected by plain string equality, so values "
        "that are legitimately the same in both languages are reported as well."
    ),
}


def build_messages(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    messages = dict(DEFAULT_MESSAGES)
    if overrides:
        messages.update({str(key): str(value) for key, value in overrides.items()})
    return messages
