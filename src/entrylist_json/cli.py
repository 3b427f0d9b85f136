"""Command-line interface for the entry list converter."""

import logging
import sys
import click
from pathlib import Path
from typing import Optional
from .entrylist_json import EntryListJSON
from .codec import EntryListXmlCodec, EntryListCodecError


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _report_profile(converter: EntryListJSON) -> None:
    if converter.profiler is None:
        return
    summary = converter.profiler.get_performance_summary()
    click.echo(f"⏱  {summary['total_operations']} operations", err=True)
    for operation in summary.get("operations", []):
        click.echo(f"   • {operation['name']}: {operation['duration'] * 1000:.2f}ms "
                   f"(input size {operation['input_size']})", err=True)


@click.group()
@click.version_option(version="1.0.0")
def main():
    """Entry List JSON - Convert between JSON documents and entry lists."""
    pass


@main.command(name="to-entries")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file for the encoded entry list (default: stdout)')
@click.option('--profile', is_flag=True, help='Print conversion timings to stderr')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def to_entries(input_file: Path, output: Optional[Path], profile: bool, verbose: bool):
    """Convert a JSON file into an encoded entry list."""
    _configure_logging(verbose)

    converter = EntryListJSON(enable_profiling=profile)
    result = converter.json_to_entries(input_file.read_text(encoding='utf-8'))
    _report_profile(converter)
    if not result.success:
        click.echo("❌ Conversion to entry list failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    entry_count = len(result.entry_list)
    data = EntryListXmlCodec().encode(result.entry_list)
    if output:
        output.write_bytes(data)
        click.echo(f"✅ Wrote {entry_count} entries to {output}")
    else:
        click.echo(data.decode('utf-8'))


@main.command(name="to-json")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output JSON file path (default: stdout)')
@click.option('--indent', '-i', type=int, default=None, help='Indent JSON output by this many spaces')
@click.option('--charset', default='utf-8', show_default=True,
              help='Charset for text entries that do not declare one')
@click.option('--profile', is_flag=True, help='Print conversion timings to stderr')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def to_json(input_file: Path, output: Optional[Path], indent: Optional[int], charset: str,
            profile: bool, verbose: bool):
    """Convert an encoded entry list file into JSON."""
    _configure_logging(verbose)

    try:
        entry_list = EntryListXmlCodec().decode(input_file.read_bytes())
    except EntryListCodecError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if entry_list is None:
        click.echo(f"❌ Error: {input_file} does not contain an entry list", err=True)
        sys.exit(1)

    converter = EntryListJSON(indent=indent, default_charset=charset, enable_profiling=profile)
    result = converter.entries_to_json(entry_list)
    _report_profile(converter)
    if not result.success:
        click.echo("❌ Conversion to JSON failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    if output:
        output.write_text(result.json_string, encoding='utf-8')
        click.echo(f"✅ Successfully wrote JSON to {output}")
    else:
        click.echo(result.json_string)


if __name__ == '__main__':
    main()
