import logging
import re
from collections.abc import Iterable, Sequence

from l10nstatus.bundles import EXTENSION
from l10nstatus.classes import BundleFamily, ResourceEntry

logger = logging.getLogger(__name__)

# name_de.properties, name_de_CH.properties, name_de_.properties
VARIANT_REGEX = re.compile(r".*_[a-z]{2}(_[a-z]{0,2})?\.properties", re.IGNORECASE)


def is_variant(filename: str) -> bool:
    return VARIANT_REGEX.fullmatch(filename) is not None


def is_base(filename: str) -> bool:
    return filename.endswith(EXTENSION) and not is_variant(filename)


def variant_filename(base_name: str, locale: str) -> str:
    stem = base_name[: -len(EXTENSION)]
    return f"{stem}_{locale}{EXTENSION}"


def resolve(
    entries: Iterable[ResourceEntry], locales: Sequence[str] | None = None
) -> list[BundleFamily]:
    """Group sorted entries into bundle families, one per base entry.

    Variants are looked up by their expected name next to the base file, so
    locale files that are not watched never show up in a family.
    """
    families = []
    for entry in entries:
        if not is_base(entry.location.name):
            continue
        family = BundleFamily(entry)
        for locale in locales or []:
            candidate = entry.location.with_name(
                variant_filename(entry.location.name, locale)
            )
            family.variants[locale] = candidate if candidate.is_file() else None
        families.append(family)
    logger.debug(f"Resolved {len(families)} bundle families")
    return families
