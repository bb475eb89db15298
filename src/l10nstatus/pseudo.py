import logging
import pathlib
from collections.abc import Iterable

from l10nstatus.bundles import DEFAULT_ENCODING, load_bundle, store_bundle
from l10nstatus.errors import BundleLoadError, ConfigurationError, PseudoLocalizationError
from l10nstatus.resolver import is_variant
from l10nstatus.scanner import scan_directory

logger = logging.getLogger(__name__)

PLACEHOLDER = "{0}"
DEFAULT_PATTERN = "XXX 什么 {0} YYY"
DEFAULT_LOCALE = "xx"
HEADER_COMMENT = (
    "Pseudo Localized bundle file for I18N testing autogenerated by l10n-status."
)


class PseudoLocalizer:
    """Writes a copy of each bundle with every value wrapped by a pattern.

    Running an application with the generated locale shows which strings are
    not externalized: they appear without the decoration.
    """

    def __init__(
        self,
        pattern: str = DEFAULT_PATTERN,
        locale: str = DEFAULT_LOCALE,
        encoding: str = DEFAULT_ENCODING,
    ):
        if pattern.count(PLACEHOLDER) != 1:
            raise ConfigurationError(
                f"The pseudo localization pattern '{pattern}' is misconfigured: "
                f"it must contain {PLACEHOLDER} exactly once."
            )
        if not locale:
            raise ConfigurationError("The pseudo locale must not be empty.")
        self.pattern = pattern
        self.locale = locale
        self.encoding = encoding

    def decorate(self, value: str) -> str:
        return self.pattern.replace(PLACEHOLDER, value)

    def output_name(self, filename: str) -> str:
        stem, dot, extension = filename.rpartition(".")
        if not dot or not stem:
            return f"{filename}_{self.locale}"
        return f"{stem}_{self.locale}.{extension}"

    def generate(self, source: pathlib.Path, destination: pathlib.Path) -> pathlib.Path:
        """Pseudo-localize source into the directory of destination.

        destination is the file path the source would have under the output
        root; the locale code is inserted into its name.
        """
        target = destination.with_name(self.output_name(destination.name))
        try:
            bundle = load_bundle(source, self.encoding)
            target.parent.mkdir(parents=True, exist_ok=True)
            store_bundle(
                target,
                {key: self.decorate(value) for key, value in bundle.items()},
                comment=HEADER_COMMENT,
                encoding=self.encoding,
            )
        except (BundleLoadError, OSError) as ex:
            raise PseudoLocalizationError(f"Error copying resource {source}: {ex}") from ex
        return target

    def run(
        self,
        input_dir: str | pathlib.Path,
        output_dir: str | pathlib.Path,
        includes: Iterable[str] | None = None,
        excludes: Iterable[str] | None = None,
    ) -> list[pathlib.Path]:
        input_path = pathlib.Path(input_dir)
        output_path = pathlib.Path(output_dir)
        if not input_path.is_dir():
            logger.info(f"Resource directory does not exist: {input_path}")
            return []

        try:
            output_path.mkdir(parents=True, exist_ok=True)
        except OSError as ex:
            raise PseudoLocalizationError(
                f"Cannot create resource output directory: {output_path}"
            ) from ex

        written = []
        for name in scan_directory(input_path, includes, excludes):
            if is_variant(pathlib.PurePosixPath(name).name):
                continue
            logger.info(f"Pseudo-localizing {name} bundle file.")
            written.append(self.generate(input_path / name, output_path / name))
        return written
