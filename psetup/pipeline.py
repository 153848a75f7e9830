"""psetup pipeline -- parse options, then scaffold the project tree.

Runs the two stages of a scaffolding run in order:

1. Resolve the command-line options (malformed or unknown tokens are reported
   and ignored, never fatal).
2. Create the directory skeleton.  Any failure here is fatal because the
   documents have nowhere to go.
3. Create the source stub and the selected documents.  Failures here are
   reported but the rest of the tree is kept.

Usage::

    python -m psetup.pipeline -nme=my-app -lng=py -dcs=license,readme
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from psetup.config import (
    DOCUMENTS_OPTION,
    LANGUAGE_OPTION,
    LICENSE_OPTION,
    NAME_OPTION,
    ROUTE_OPTION,
    Config,
)
from psetup.parser import ProcessResult, process_arguments
from psetup.scaffolder import (
    GenerationResult,
    ItemDescription,
    ItemGenerator,
    ItemKind,
    TemplateStore,
    build_directories,
    build_documents,
    full_file_path,
    project_directory,
)
from psetup.utils import (
    console,
    print_error,
    print_success,
    print_options_table,
    print_warning,
)


HELP_FLAGS = ("-h", "--help")


# ---------------------------------------------------------------------------
# Run report
# ---------------------------------------------------------------------------


@dataclass
class SetupReport:
    """Outcome of a scaffolding run."""

    options: ProcessResult
    project_dir: Path
    directories: GenerationResult = field(default_factory=GenerationResult)
    files: GenerationResult = field(default_factory=GenerationResult)
    files_attempted: bool = False

    @property
    def success(self) -> bool:
        return (
            self.directories.succeeded
            and self.files_attempted
            and self.files.succeeded
        )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def resolve_options(argv: Sequence[str], config: Config) -> ProcessResult:
    """Resolve *argv* against the option definitions of *config*."""
    return process_arguments(
        argv,
        config.option_specs(),
        config.option_prefix,
        config.option_sign,
        config.option_size,
    )


def run_setup(argv: Sequence[str], config: Config | None = None) -> SetupReport:
    """Scaffold a project from the command-line tokens in *argv*.

    Args:
        argv: Raw tokens, without the program name.
        config: Run settings.  Defaults to :meth:`Config.from_env`.

    Returns:
        A :class:`SetupReport`.  Generation failures are collected in it
        rather than raised.
    """
    config = config or Config.from_env()
    options = resolve_options(argv, config)
    for ignored in options.ignored:
        print_warning(f"Ignoring argument {escape(ignored.token)}: {escape(ignored.reason)}")

    name = options.first(config.option_name(NAME_OPTION))
    route = options.first(config.option_name(ROUTE_OPTION))
    project_dir = project_directory(route, name)
    report = SetupReport(options=options, project_dir=project_dir)

    if config.verbose:
        print_options_table(
            {spec: escape(", ".join(values)) for spec, values in options.values.items()}
        )

    store = TemplateStore(
        config.template_dir,
        context={"project_name": name, "author": config.author},
    )
    generator = ItemGenerator(store)

    directories = build_directories(project_dir)
    report.directories = generator.create_items(directories)
    _report_stage("directory", directories, report.directories, config.verbose)
    if not report.directories.succeeded:
        return report

    files = build_documents(
        project_dir,
        language=options.first(config.option_name(LANGUAGE_OPTION)),
        license_id=options.first(config.option_name(LICENSE_OPTION)),
        documents=options.values[config.option_name(DOCUMENTS_OPTION)],
    )
    report.files = generator.create_items(files)
    report.files_attempted = True
    _report_stage("file", files, report.files, config.verbose)
    return report


def _report_stage(
    stage: str,
    items: Sequence[ItemDescription],
    result: GenerationResult,
    verbose: bool,
) -> None:
    """Print the failures of one stage and, when verbose, what was created."""
    for failure in result:
        print_error(escape(str(failure)))
    if verbose:
        created = len(items) - len(result)
        console.print(f"[dim]{stage} stage: {created}/{len(items)} created[/dim]")
        for item in items:
            if item.kind == ItemKind.DIRECTORY:
                path = Path(item.creation_path) / item.name
            else:
                path = full_file_path(item.creation_path, item.name, item.extension)
            console.print(f"[dim]  {escape(str(path))}[/dim]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def print_help(config: Config) -> None:
    """Print the option reference."""
    console.print(
        "Usage: psetup "
        + " ".join(
            escape(f"[{spec.name}{config.option_sign}<value>]")
            for spec in config.option_specs()
        )
    )
    console.print()
    print_options_table(
        {
            spec.name: (
                f"{spec.description} (default: {', '.join(spec.default_values)}; "
                f"allowed: {', '.join(sorted(spec.allowed_values))})"
            )
            for spec in config.option_specs()
        }
    )


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``psetup`` and ``python -m psetup.pipeline``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    config = Config.from_env()

    if any(token in HELP_FLAGS for token in argv):
        print_help(config)
        return

    report = run_setup(argv, config)

    if not report.directories.succeeded:
        print_error(f"Could not create all directories of {escape(str(report.project_dir))}")
        sys.exit(1)
    if not report.files.succeeded:
        print_warning(
            f"Project created at {escape(str(report.project_dir))} "
            f"with {len(report.files)} missing file(s)"
        )
        sys.exit(1)
    print_success(f"psetup: project structure created at {escape(str(report.project_dir))}")


if __name__ == "__main__":
    main()
