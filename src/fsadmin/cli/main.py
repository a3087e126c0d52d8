"""
fsadmin CLI Main Entry Point.

Command-line access to every filesystem administration operation.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
import humanize
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fsadmin import __version__
from fsadmin.core.config import FsAdminConfig, load_config
from fsadmin.core.errors import FsAdminError
from fsadmin.core.models import (
    ExternalJournalFormatOptions,
    JournalDevice,
    JournalLabel,
    JournalOptions,
    JournalRef,
    JournalUUID,
    MkfsOptions,
)
from fsadmin.core.session import Session

console = Console()


def get_session(ctx: click.Context) -> Session:
    """Get or create session from context."""
    if "session" not in ctx.obj:
        config = ctx.obj.get("config") or load_config()
        ctx.obj["session"] = Session(config=config)
    return ctx.obj["session"]


def fail(error: FsAdminError | str) -> NoReturn:
    console.print(f"Error: {error}", style="red", markup=False)
    sys.exit(1)


def emit(ctx: click.Context, payload: dict[str, Any], message: str) -> None:
    """Print a result as JSON or as a human-readable line."""
    if ctx.obj.get("json_output", False):
        click.echo(json.dumps(payload, indent=2))
    elif not ctx.obj.get("quiet", False):
        console.print(message)


@click.group()
@click.version_option(version=__version__, prog_name="fsadmin")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, json_output: bool, quiet: bool) -> None:
    """
    fsadmin - Filesystem administration tools.

    Wraps tune2fs, e2label, e2fsck, resize2fs, mke2fs and mkfs.
    """
    ctx.ensure_object(dict)

    if "config" not in ctx.obj:
        ctx.obj["config"] = FsAdminConfig.load(config) if config else load_config()

    ctx.obj["json_output"] = json_output
    ctx.obj["quiet"] = quiet


# ==================== ext2/3/4 ====================


@cli.command("attributes")
@click.argument("device")
@click.pass_context
def attributes(ctx: click.Context, device: str) -> None:
    """List all superblock attributes of an ext2/3/4 filesystem."""
    session = get_session(ctx)
    try:
        attrs = session.ext2.list_attributes(device)
    except FsAdminError as e:
        fail(e)

    if ctx.obj.get("json_output", False):
        click.echo(json.dumps([{"key": k, "value": v} for k, v in attrs], indent=2))
        return

    table = Table(title=f"Filesystem attributes of {escape(device)}")
    table.add_column("Attribute", style="cyan")
    table.add_column("Value", style="white")
    for key, value in attrs:
        table.add_row(escape(key), escape(value))
    console.print(table)


@cli.command("get-label")
@click.argument("device")
@click.pass_context
def get_label(ctx: click.Context, device: str) -> None:
    """Show the label of an ext2/3/4 filesystem."""
    session = get_session(ctx)
    try:
        label = session.ext2.get_label(device)
    except FsAdminError as e:
        fail(e)
    if ctx.obj.get("json_output", False):
        click.echo(json.dumps({"device": device, "label": label}, indent=2))
    else:
        click.echo(label)


@cli.command("set-label")
@click.argument("device")
@click.argument("label")
@click.pass_context
def set_label(ctx: click.Context, device: str, label: str) -> None:
    """Set the label of an ext2/3/4 filesystem."""
    session = get_session(ctx)
    try:
        session.ext2.set_label(device, label)
    except FsAdminError as e:
        fail(e)
    emit(ctx, {"device": device, "label": label}, f"[green]Label of {escape(device)} set to {escape(label)}[/green]")


@cli.command("get-uuid")
@click.argument("device")
@click.pass_context
def get_uuid(ctx: click.Context, device: str) -> None:
    """Show the UUID of an ext2/3/4 filesystem."""
    session = get_session(ctx)
    try:
        uuid = session.ext2.get_uuid(device)
    except FsAdminError as e:
        fail(e)
    if ctx.obj.get("json_output", False):
        click.echo(json.dumps({"device": device, "uuid": uuid}, indent=2))
    else:
        click.echo(uuid)


@cli.command("set-uuid")
@click.argument("device")
@click.argument("uuid")
@click.pass_context
def set_uuid(ctx: click.Context, device: str, uuid: str) -> None:
    """Set the UUID of an ext2/3/4 filesystem."""
    session = get_session(ctx)
    try:
        session.ext2.set_uuid(device, uuid)
    except FsAdminError as e:
        fail(e)
    emit(ctx, {"device": device, "uuid": uuid}, f"[green]UUID of {escape(device)} set to {escape(uuid)}[/green]")


@cli.command("check")
@click.argument("device")
@click.pass_context
def check(ctx: click.Context, device: str) -> None:
    """Force a consistency check (e2fsck -p -f)."""
    session = get_session(ctx)
    try:
        session.ext2.check(device)
    except FsAdminError as e:
        fail(e)
    emit(ctx, {"device": device, "clean": True}, f"[green]{escape(device)} is clean[/green]")


@cli.command("resize")
@click.argument("device")
@click.pass_context
def resize(ctx: click.Context, device: str) -> None:
    """Grow an ext2/3/4 filesystem to fill its device."""
    session = get_session(ctx)
    try:
        session.ext2.resize(device)
    except FsAdminError as e:
        fail(e)
    emit(ctx, {"device": device, "resized": True}, f"[green]Resized {escape(device)}[/green]")


@cli.command("mkjournal")
@click.argument("device")
@click.option("--blocksize", "-b", type=int, required=True, help="Journal block size in bytes")
@click.option("--label", "-L", help="Label for the journal device")
@click.option("--uuid", "-U", help="UUID for the journal device")
@click.pass_context
def mkjournal(
    ctx: click.Context,
    device: str,
    blocksize: int,
    label: str | None,
    uuid: str | None,
) -> None:
    """Format DEVICE as an external ext journal."""
    session = get_session(ctx)
    options = JournalOptions(blocksize=blocksize, device=device, label=label, uuid=uuid)
    try:
        session.ext2.create_journal(options)
    except FsAdminError as e:
        fail(e)
    emit(
        ctx,
        {"device": device, "blocksize": blocksize, "label": label, "uuid": uuid},
        f"[green]Created journal device {escape(device)}[/green]",
    )


@cli.command("mke2fs-journal")
@click.argument("device")
@click.option(
    "--fstype",
    "-t",
    default="ext4",
    show_default=True,
    help="Filesystem type passed to mke2fs -t",
)
@click.option("--blocksize", "-b", type=int, required=True, help="Block size in bytes")
@click.option("--journal-device", help="Journal device path")
@click.option("--journal-label", help="Label of the journal device")
@click.option("--journal-uuid", help="UUID of the journal device")
@click.pass_context
def mke2fs_journal(
    ctx: click.Context,
    device: str,
    fstype: str,
    blocksize: int,
    journal_device: str | None,
    journal_label: str | None,
    journal_uuid: str | None,
) -> None:
    """Create an ext filesystem on DEVICE using an external journal."""
    refs: list[JournalRef] = []
    if journal_device:
        refs.append(JournalDevice(journal_device))
    if journal_label:
        refs.append(JournalLabel(journal_label))
    if journal_uuid:
        refs.append(JournalUUID(journal_uuid))
    if len(refs) != 1:
        fail("exactly one of --journal-device, --journal-label, --journal-uuid is required")

    session = get_session(ctx)
    options = ExternalJournalFormatOptions(
        fstype=fstype, blocksize=blocksize, device=device, journal=refs[0]
    )
    try:
        session.ext2.create_with_external_journal(options)
    except FsAdminError as e:
        fail(e)
    emit(
        ctx,
        {"device": device, "fstype": fstype, "journal": refs[0].spec},
        f"[green]Created {escape(fstype)} on {escape(device)} ({escape(refs[0].spec)})[/green]",
    )


# ==================== mkfs ====================


@cli.command("mkfs")
@click.argument("fstype")
@click.argument("device")
@click.option("--blocksize", "-b", type=int, help="Block (or FAT cluster) size in bytes")
@click.pass_context
def mkfs(ctx: click.Context, fstype: str, device: str, blocksize: int | None) -> None:
    """Create a FSTYPE filesystem on DEVICE."""
    session = get_session(ctx)
    try:
        session.mkfs.make_filesystem(
            MkfsOptions(fstype=fstype, device=device, blocksize=blocksize)
        )
    except FsAdminError as e:
        fail(e)

    message = f"[green]Created {escape(fstype)} on {escape(device)}"
    if blocksize is not None:
        message += f" (block size {humanize.naturalsize(blocksize, binary=True)})"
    emit(
        ctx,
        {"device": device, "fstype": fstype, "blocksize": blocksize},
        message + "[/green]",
    )


@cli.command("actions")
@click.pass_context
def list_actions(ctx: click.Context) -> None:
    """List the remote-call actions this daemon exposes."""
    session = get_session(ctx)
    names = session.actions.list_actions()

    if ctx.obj.get("json_output", False):
        click.echo(json.dumps(names, indent=2))
        return

    table = Table(title="Actions")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="white")
    for name in names:
        action = session.actions.get(name)
        table.add_row(name, action.description if action else "")
    console.print(table)


def main() -> None:
    """Main entry point."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
