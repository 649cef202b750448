from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from PIL import ExifTags, Image
from pypdf import PdfReader

from docview import __version__
from docview.cli import cli


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_info_png(png_file: Path) -> None:
    result = CliRunner().invoke(cli, ["info", str(png_file)])
    assert result.exit_code == 0
    assert "raster" in result.output
    assert "100 x 200" in result.output


def test_info_pdf(sample_pdf: Path) -> None:
    result = CliRunner().invoke(cli, ["info", str(sample_pdf)])
    assert result.exit_code == 0
    assert "Pages" in result.output
    assert "Title" in result.output
    assert "Sample" in result.output


def test_info_shows_camera_exif(tmp_path: Path) -> None:
    path = tmp_path / "camera.jpg"
    exif = Image.Exif()
    exif[ExifTags.Base.Make] = "Canon"
    exif[ExifTags.Base.Model] = "Canon EOS 5D"
    Image.new("RGB", (40, 30), "white").save(path, exif=exif)

    result = CliRunner().invoke(cli, ["info", str(path)])
    assert result.exit_code == 0, result.output
    assert "Camera" in result.output
    assert "Canon EOS 5D" in result.output
    assert "Color Type" in result.output


def test_transform_rotates_png(png_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "rotated.png"
    result = CliRunner().invoke(cli, ["transform", str(png_file), "-o", str(output), "--op", "rotate-cw"])

    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (200, 100)


def test_transform_chains_ops_and_crop(png_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "cropped.png"
    result = CliRunner().invoke(
        cli,
        ["transform", str(png_file), "-o", str(output), "--op", "rotate-cw", "--op", "flip-h", "--crop", "0,0,50,40"],
    )

    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (50, 40)


def test_transform_rejects_malformed_crop(png_file: Path, tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["transform", str(png_file), "-o", str(tmp_path / "x.png"), "--crop", "1,2,3"])
    assert result.exit_code == 2


def test_transform_reports_out_of_bounds_crop(png_file: Path, tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli, ["transform", str(png_file), "-o", str(tmp_path / "x.png"), "--crop", "0,0,101,10"]
    )
    assert result.exit_code == 1
    assert "Error" in result.output


def test_transform_pdf_to_svg_fails(sample_pdf: Path, tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["transform", str(sample_pdf), "-o", str(tmp_path / "x.svg")])
    assert result.exit_code == 1


def test_transform_svg_fine_rotation(svg_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "tilted.svg"
    result = CliRunner().invoke(cli, ["transform", str(svg_file), "-o", str(output), "--angle", "30"])

    assert result.exit_code == 0, result.output
    assert "matrix(" in output.read_text(encoding="utf-8")


def test_transform_explicit_format(png_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "photo.out"
    result = CliRunner().invoke(cli, ["transform", str(png_file), "-o", str(output), "--format", "jpeg"])

    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.format == "JPEG"


def test_thumbnails_for_pdf(sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "thumbs"
    result = CliRunner().invoke(cli, ["thumbnails", str(sample_pdf), "-o", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "sample_001.png",
        "sample_002.png",
        "sample_003.png",
    ]


def test_thumbnails_for_svg(svg_file: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "thumbs"
    result = CliRunner().invoke(cli, ["thumbnails", str(svg_file), "-o", str(output_dir)])

    assert result.exit_code == 0, result.output
    assert (output_dir / "drawing_001.svg").exists()


def test_missing_input_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["info", str(tmp_path / "missing.png")])
    assert result.exit_code == 2


def test_transform_page_selects_rendered_page(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "page.png"
    result = CliRunner().invoke(cli, ["transform", str(sample_pdf), "-o", str(output), "--page", "2"])

    assert result.exit_code == 0, result.output
    assert "ignored" not in result.output
    with Image.open(output) as image:
        assert image.size == (72, 72)


def test_transform_page_is_ignored_for_pdf_output(sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "copy.pdf"
    result = CliRunner().invoke(cli, ["transform", str(sample_pdf), "-o", str(output), "--page", "1"])

    assert result.exit_code == 0, result.output
    assert "--page is ignored for PDF output" in result.output
    assert len(PdfReader(output).pages) == 3
