"""CLI entry point for npm-version-sync."""

import pathlib
import sys
from typing import Optional, Tuple

import click
import questionary
from questionary import Style

from .config import DEFAULT_SOURCE, DEFAULT_TARGETS, SyncConfig
from .errors import ConfigurationError
from .logging import configure_logging
from .sync import check_versions, sync_versions
from .version import read_canonical_version

style = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
])


def _confirm_sync(config: SyncConfig, version: str) -> bool:
    """Show what will be written and ask before touching any file."""
    questionary.print(f"\nSync summary ({config.source} -> {version}):", style="fg:cyan bold")
    for target in config.targets:
        questionary.print(f"  {target}", style="fg:green")
    print()
    return bool(
        questionary.confirm("Write these manifests?", default=True, style=style).ask()
    )


def run(config: SyncConfig) -> int:
    """Run a sync or check for ``config`` and return the exit status."""
    configure_logging(config.verbose)

    try:
        if config.check:
            result = check_versions(config)
            return 0 if result.ok else 2

        version = None
        if config.confirm:
            version = read_canonical_version(config.source_path)
            if not _confirm_sync(config, version):
                click.echo("Aborted.")
                return 0

        sync_versions(config, version=version)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        return 1

    return 0


@click.command()
@click.version_option(package_name="npm-version-sync")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=pathlib.Path),
    default=".",
    help="Repository root that the source and target paths are relative to",
)
@click.option(
    "--source",
    type=str,
    default=DEFAULT_SOURCE,
    show_default=True,
    help="Manifest holding the canonical version line",
)
@click.option(
    "--target",
    "targets",
    type=str,
    multiple=True,
    help="package.json to update (repeatable; replaces the default list)",
)
@click.option(
    "--check",
    is_flag=True,
    help="Report out-of-date manifests without writing; exit 2 if any",
)
@click.option(
    "--confirm",
    is_flag=True,
    help="Ask before writing any manifest",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
def main(
    root: pathlib.Path,
    source: str,
    targets: Tuple[str, ...],
    check: bool,
    confirm: bool,
    verbose: bool,
):
    """Sync npm package versions to the version in Cargo.toml."""
    config = SyncConfig(
        root=root,
        source=source,
        targets=targets or DEFAULT_TARGETS,
        check=check,
        confirm=confirm,
        verbose=verbose,
    )
    sys.exit(run(config))


def entrypoint(root: Optional[pathlib.Path] = None) -> None:
    """Invoke the CLI, defaulting ``--root`` to ``root`` when given."""
    args = sys.argv[1:]
    if root is not None and "--root" not in args:
        args = ["--root", str(root), *args]
    main(args=args)
