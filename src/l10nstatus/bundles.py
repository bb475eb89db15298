import logging
from collections.abc import Mapping
from pathlib import Path

from jproperties import ParseError, Properties

from l10nstatus.errors import BundleLoadError

logger = logging.getLogger(__name__)

# Java reads and writes .properties files as ISO-8859-1 with \uXXXX escapes
DEFAULT_ENCODING = "iso-8859-1"
EXTENSION = ".properties"


def load_bundle(path: Path, encoding: str = DEFAULT_ENCODING) -> dict[str, str]:
    """Load a .properties file into a plain key/value dict.

    Duplicate keys follow the usual properties semantics: the last one wins.
    Read and parse failures are raised as BundleLoadError.
    """
    logger.debug(f"Loading {path}")
    props = Properties()
    try:
        with open(path, "rb") as file:
            props.load(file, encoding)
    except (OSError, ParseError, UnicodeError) as ex:
        raise BundleLoadError(path, ex) from ex
    return {key: value.data for key, value in props.items()}


def store_bundle(
    path: Path,
    bundle: Mapping[str, str],
    comment: str | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    props = Properties()
    for key, value in bundle.items():
        props[key] = value
    with open(path, "wb") as file:
        props.store(file, initial_comments=comment, encoding=encoding)
