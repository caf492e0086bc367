import logging

import click

from regsnap import __version__
from regsnap.cli.error_boundary import cli_error_boundary
from regsnap.cli.output import machine_output
from regsnap.core.context import RegsnapContext, create_context
from regsnap.core.options import SnapshotOptions
from regsnap.core.serialize import snapshot, validate_output_format
from regsnap.core.snapshot import build_snapshot

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logging and full stack traces.")
@click.option(
    "--threads",
    type=click.IntRange(min=1),
    default=None,
    help="Concurrent registry requests (default: config, else 10).",
)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool, threads: int | None) -> None:
    """Take point-in-time inventory snapshots of container registries."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug, threads=threads)


@cli.command("snapshot")
@click.option(
    "-o",
    "--output-format",
    default=None,
    help="csv or yaml (default: config, else csv).",
)
@click.option("--snapshot", "snapshot_source", default="", help="Registry to snapshot live.")
@click.option(
    "--manifest-based-snapshot-of",
    default="",
    help="Registry whose inventory is derived from the manifest's promotion edges.",
)
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False),
    default="",
    help="Promoter manifest to append to the snapshot.",
)
@click.option("--snapshot-tag", default="", help="Only include digests carrying this tag.")
@click.option(
    "--minimal-snapshot",
    is_flag=True,
    help="Drop tagless child digests of manifest lists.",
)
@click.option(
    "--snapshot-service-account",
    default=None,
    help="Service account for registry reads (default: config).",
)
@click.pass_obj
@cli_error_boundary
def snapshot_cmd(
    ctx: RegsnapContext,
    output_format: str | None,
    snapshot_source: str,
    manifest_based_snapshot_of: str,
    manifest: str,
    snapshot_tag: str,
    minimal_snapshot: bool,
    snapshot_service_account: str | None,
) -> None:
    """Print an inventory snapshot of a registry as CSV or YAML."""
    options = SnapshotOptions(
        output_format=(
            output_format if output_format is not None else ctx.global_config.output_format
        ),
        snapshot=snapshot_source,
        manifest_based_snapshot_of=manifest_based_snapshot_of,
        manifest=manifest,
        snapshot_tag=snapshot_tag,
        minimal_snapshot=minimal_snapshot,
        snapshot_service_account=(
            snapshot_service_account
            if snapshot_service_account is not None
            else ctx.global_config.service_account
        ),
    )

    # Fail on a bad format before crawling anything
    validate_output_format(options.output_format)

    inventory = build_snapshot(ctx, options)
    snapshot(inventory, options.output_format, machine_output)


def main() -> None:
    """CLI entry point used by the `regsnap` console script."""
    cli()
