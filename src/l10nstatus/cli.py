import logging
import sys
from typing import Any

import click
from l10nstatus import report, scanner
from l10nstatus.bundles import DEFAULT_ENCODING
from l10nstatus.classes import DEFAULT_INCLUDES, Project, ResourceDirectory
from l10nstatus.config import load_config, parse_projects, setup_logging
from l10nstatus.errors import L10nError
from l10nstatus.messages import build_messages
from l10nstatus.pseudo import DEFAULT_LOCALE, DEFAULT_PATTERN, PseudoLocalizer
from l10nstatus.sinks import SINKS

logger = logging.getLogger(__name__)


def _configure(config_folder: str) -> dict[str, Any]:
    try:
        config = load_config(config_folder)
    except L10nError as exc:
        logging.basicConfig()
        logger.error(str(exc))
        sys.exit(1)
    setup_logging(config)
    return config


@click.group()
@click.version_option(package_name="l10n-status")
def cli() -> None:
    pass


@cli.command("report")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option(
    "--resources",
    "resource_dirs",
    multiple=True,
    help="Resource directory to scan, overrides the configured projects.",
)
@click.option("--include", "includes", multiple=True, help="Include glob for --resources.")
@click.option("--exclude", "excludes", multiple=True, help="Exclude glob for --resources.")
@click.option("--locale", "locales", multiple=True, help="Locale to watch.")
@click.option(
    "--aggregate/--no-aggregate",
    default=None,
    help="Report all configured projects instead of the first one.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SINKS)),
    default="markdown",
    show_default=True,
)
@click.option("--output", type=click.Path(dir_okay=False), help="Output file, stdout by default.")
@click.option("--encoding", default=None, help="Encoding of the bundle files.")
def report_command(
    config_folder: str,
    resource_dirs: tuple[str, ...],
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    locales: tuple[str, ...],
    aggregate: bool | None,
    output_format: str,
    output: str | None,
    encoding: str | None,
) -> None:
    config = _configure(config_folder)
    report_cfg = config.get("report") or {}

    try:
        if resource_dirs:
            projects = [
                Project(
                    "default",
                    [
                        ResourceDirectory(
                            d, list(includes) or list(DEFAULT_INCLUDES), list(excludes)
                        )
                        for d in resource_dirs
                    ],
                )
            ]
        else:
            projects = parse_projects(report_cfg)
            if aggregate is None:
                aggregate = bool(report_cfg.get("aggregate", False))
            if not aggregate:
                projects = projects[:1]
    except L10nError as exc:
        logger.error(str(exc))
        sys.exit(1)

    watched = list(locales) or [str(x) for x in report_cfg.get("locales") or []]
    encoding = encoding or report_cfg.get("encoding") or DEFAULT_ENCODING

    entries = scanner.discover(projects)
    if not scanner.can_generate_report(projects, entries):
        logger.info("No resource bundles found, the report is not generated.")
        return

    model = report.build_report(entries, watched, encoding)
    sink = SINKS[output_format]()
    report.render(model, sink, build_messages(config.get("messages")))

    if output:
        with open(output, "w", encoding="utf-8") as file:
            file.write(sink.getvalue())
        logger.info(f"Report written to {output}")
    else:
        click.echo(sink.getvalue(), nl=False)


@cli.command("pseudo")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--input-dir", default=None, help="Folder holding the bundles to pseudo-localize.")
@click.option("--output-dir", default=None, help="Folder the generated bundles are written to.")
@click.option("--include", "includes", multiple=True, help="Include glob.")
@click.option("--exclude", "excludes", multiple=True, help="Exclude glob.")
@click.option("--pattern", default=None, help="Decoration pattern containing {0} once.")
@click.option("--locale", default=None, help="Pseudo locale code.")
@click.option("--encoding", default=None, help="Encoding of the bundle files.")
def pseudo_command(
    config_folder: str,
    input_dir: str | None,
    output_dir: str | None,
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    pattern: str | None,
    locale: str | None,
    encoding: str | None,
) -> None:
    config = _configure(config_folder)
    pseudo_cfg = config.get("pseudo") or {}

    input_dir = input_dir or pseudo_cfg.get("input_directory")
    output_dir = output_dir or pseudo_cfg.get("output_directory") or input_dir
    if not input_dir:
        logger.error("No input directory configured.")
        sys.exit(1)

    try:
        localizer = PseudoLocalizer(
            pattern if pattern is not None else pseudo_cfg.get("pattern", DEFAULT_PATTERN),
            locale or pseudo_cfg.get("locale", DEFAULT_LOCALE),
            encoding or pseudo_cfg.get("encoding", DEFAULT_ENCODING),
        )
        written = localizer.run(
            input_dir,
            output_dir,
            list(includes) or pseudo_cfg.get("includes"),
            list(excludes) or pseudo_cfg.get("excludes"),
        )
    except L10nError as exc:
        logger.error(str(exc))
        sys.exit(1)

    logger.info(f"Generated {len(written)} pseudo-localized bundles")
