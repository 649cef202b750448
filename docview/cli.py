"""
Command-line interface for docview.
"""

import os
import sys

import click
from rich.console import Console
from rich.table import Table

from docview import __version__
from docview.config import ViewerSettings
from docview.exceptions import DocViewError
from docview.loaders import load_document
from docview.metadata import extract_metadata
from docview.operations import (
    ExportFormat,
    ImageExportOptions,
    crop_document,
    export_document,
    flip_document_horizontal,
    flip_document_vertical,
    reset_document_transforms,
    rotate_document_ccw,
    rotate_document_cw,
    rotate_document_to,
)
from docview.operations.export import save_image
from docview.types import DocumentKind

console = Console()

OPERATIONS = {
    "rotate-cw": rotate_document_cw,
    "rotate-ccw": rotate_document_ccw,
    "flip-h": flip_document_horizontal,
    "flip-v": flip_document_vertical,
    "reset": reset_document_transforms,
}


def _parse_crop(ctx, param, value):
    if value is None:
        return None
    try:
        x, y, width, height = (int(part) for part in value.split(","))
    except ValueError:
        raise click.BadParameter("expected X,Y,WIDTH,HEIGHT as four integers")
    return (x, y, width, height)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    docview - Inspect, transform and export raster, SVG and PDF documents.
    """
    pass


@cli.command(name="info")
@click.argument('input_file', type=click.Path(exists=True))
def show_info(input_file):
    """
    Display information about a document.

    Example:

        docview info photo.png
    """
    try:
        settings = ViewerSettings.from_env()
        document = load_document(input_file, settings)
        metadata = extract_metadata(input_file, document)
        width, height = document.dimensions()

        table = Table(title=f"Document Information: {os.path.basename(input_file)}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", metadata.file_path)
        table.add_row("File Size", metadata.file_size_display)
        table.add_row("Kind", document.kind.value)
        table.add_row("Format", metadata.format)
        table.add_row("Color Type", metadata.color_type)
        table.add_row("Native Size", metadata.resolution_display)
        table.add_row("Effective Size", f"{width} x {height}")
        table.add_row("Pages", str(metadata.page_count))

        exif = metadata.exif
        if exif is not None:
            for label, value in (
                ("Camera", exif.camera_display),
                ("Date Taken", exif.date_time),
                ("Exposure", exif.exposure_time),
                ("Aperture", exif.f_number),
                ("ISO", str(exif.iso) if exif.iso is not None else None),
                ("Focal Length", exif.focal_length),
                ("GPS", exif.gps_display),
            ):
                if value:
                    table.add_row(label, value)
        for key, value in metadata.properties.items():
            table.add_row(key, value)

        console.print()
        console.print(table)
        console.print()
        document.close()

    except DocViewError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="transform")
@click.argument('input_file', type=click.Path(exists=True))
@click.option(
    '--output', '-o',
    required=True,
    help='Output file; the extension selects the format unless --format is given',
    type=click.Path()
)
@click.option(
    '--op', 'operations',
    multiple=True,
    type=click.Choice(sorted(OPERATIONS)),
    help='Transform to apply; repeat to chain, applied in order'
)
@click.option(
    '--angle',
    type=float,
    help='Absolute clockwise rotation in degrees, applied after --op'
)
@click.option(
    '--crop',
    callback=_parse_crop,
    help='Crop rectangle X,Y,WIDTH,HEIGHT in effective coordinates, applied last'
)
@click.option(
    '--page',
    default=0,
    type=int,
    help='Page to render (0-indexed) for image output; PDF output always keeps every page'
)
@click.option(
    '--format', 'fmt',
    type=click.Choice([item.value for item in ExportFormat]),
    help='Output format'
)
def transform(input_file, output, operations, angle, crop, page, fmt):
    """
    Load a document, apply transforms and export it.

    Examples:

        docview transform scan.png -o scan_rotated.png --op rotate-cw

        docview transform logo.svg -o logo.svg --op flip-h --angle 30

        docview transform report.pdf -o report.pdf --op rotate-ccw --op flip-v
    """
    try:
        settings = ViewerSettings.from_env()
        document = load_document(input_file, settings)
        if page:
            document.go_to_page(page)

        for name in operations:
            state = OPERATIONS[name](document)
            console.print(f"[dim]{name}: {state}[/dim]")
        if angle is not None:
            rotate_document_to(document, angle)
        if crop is not None:
            crop_document(document, *crop)

        export_format = ExportFormat(fmt) if fmt else ExportFormat.from_path(output)
        if page and document.kind is DocumentKind.PORTABLE and export_format is ExportFormat.PDF:
            console.print("[yellow]--page is ignored for PDF output; every page is written[/yellow]")

        options = ImageExportOptions(quality=settings.jpeg_quality)
        target = export_document(document, output, export_format, options)
        width, height = document.dimensions()
        document.close()

        console.print(f"\n[bold green]✓ Wrote {width} x {height} document[/bold green]")
        console.print(f"[dim]Output file: {os.path.abspath(target)}[/dim]\n")

    except DocViewError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="thumbnails")
@click.argument('input_file', type=click.Path(exists=True))
@click.option(
    '--output-dir', '-o',
    default='./thumbnails',
    help='Output directory for thumbnails',
    type=click.Path()
)
def thumbnails(input_file, output_dir):
    """
    Write one thumbnail per page.

    Example:

        docview thumbnails report.pdf -o thumbs
    """
    try:
        settings = ViewerSettings.from_env()
        document = load_document(input_file, settings)
        stem = os.path.splitext(os.path.basename(input_file))[0]
        os.makedirs(output_dir, exist_ok=True)

        created = []
        for page in range(document.page_count()):
            surface = document.thumbnail(page)
            if surface.svg is not None:
                path = os.path.join(output_dir, f"{stem}_{page + 1:03d}.svg")
                with open(path, "w", encoding="utf-8") as handle:
                    handle.write(surface.svg)
            else:
                path = os.path.join(output_dir, f"{stem}_{page + 1:03d}.png")
                save_image(surface.image, path, ExportFormat.PNG, ImageExportOptions())
            created.append(path)
        document.close()

        console.print(f"\n[bold green]✓ Created {len(created)} thumbnails[/bold green]")
        console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]\n")

    except DocViewError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == '__main__':
    cli()
