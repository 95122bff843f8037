"""
CLI tool to verify HIBC LIC check digits.

Usage:
    poetry run hibc-verify A12345P A123459
    poetry run hibc-verify --file scans.txt --prefix +H123 --format csv
    poetry run python -m tools.verify.main --file scans.txt --output report.json --format json
"""

import csv
import json
import sys
from io import StringIO
from pathlib import Path

import click
import structlog

from hibc.barcode import HIBC_ALPHABET, HibcError, HibcValidator
from hibc.config import configure_logging, get_settings

logger = structlog.get_logger(__name__)

COLUMNS = [
    "input",
    "is_valid",
    "labeler_identification_code",
    "item_number",
    "unit_of_measure",
    "check_digit",
    "calculated_check_digit",
    "error",
]


def read_codes(file_path: Path) -> list[str]:
    """Read barcodes from a text file, one per line, skipping blank lines."""
    with open(file_path, encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


def verify_codes(codes: list[str], validator: HibcValidator) -> list[dict[str, str]]:
    """
    Verify each barcode.

    Structural failures do not stop the run; they are recorded in the
    error column of the row.
    """
    rows: list[dict[str, str]] = []

    for code in codes:
        row = dict.fromkeys(COLUMNS, "")
        row["input"] = code
        try:
            barcode = validator.parse(code)
        except HibcError as e:
            logger.warning("Barcode rejected", code=code, error=str(e))
            row["is_valid"] = "False"
            row["error"] = str(e)
        else:
            row.update({key: value for key, value in barcode.to_row().items() if key in row})
            if not barcode.is_valid:
                row["error"] = "Check digit mismatch"
        rows.append(row)

    return rows


def format_csv(rows: list[dict[str, str]]) -> str:
    """Format rows as CSV."""
    output = StringIO()
    writer = csv.DictWriter(output, fieldnames=COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return output.getvalue()


def escape_cell(value: str) -> str:
    """Escape pipes so a value stays inside its markdown table cell."""
    return value.replace("|", "\\|")


def format_markdown(rows: list[dict[str, str]]) -> str:
    """Format rows as markdown table."""
    lines = [
        "| " + " | ".join(COLUMNS) + " |",
        "|" + "|".join("---" for _ in COLUMNS) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(escape_cell(row[column]) for column in COLUMNS) + " |")
    return "\n".join(lines)


def format_json(rows: list[dict[str, str]]) -> str:
    """Format rows as a JSON array."""
    return json.dumps(
        [{**row, "is_valid": row["is_valid"] == "True"} for row in rows],
        indent=2,
    )


FORMATTERS = {
    "csv": format_csv,
    "json": format_json,
    "markdown": format_markdown,
}


@click.command()
@click.argument("codes", nargs=-1)
@click.option(
    "--file", "-i",
    "input_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Text file with one barcode per line",
)
@click.option(
    "--prefix", "-p",
    default=None,
    help="Expected labeler identification code (defaults to HIBC_LABELER_CODE)",
)
@click.option(
    "--modulus", "-m",
    type=click.IntRange(1, len(HIBC_ALPHABET)),
    default=None,
    help="Check digit modulus (defaults to HIBC_MODULUS)",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path (defaults to stdout)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(sorted(FORMATTERS)),
    default="markdown",
    help="Output format (default: markdown)",
)
def main(
    codes: tuple[str, ...],
    input_file: Path | None,
    prefix: str | None,
    modulus: int | None,
    output: Path | None,
    output_format: str,
) -> None:
    """Verify the Modulo 43 check digit of HIBC LIC barcodes."""
    settings = get_settings()
    configure_logging(settings)

    all_codes = list(codes)
    if input_file:
        all_codes.extend(read_codes(input_file))

    if not all_codes:
        raise click.UsageError("Provide at least one barcode or --file")

    validator = HibcValidator(
        prefix=settings.labeler_code if prefix is None else prefix,
        modulus=settings.modulus if modulus is None else modulus,
    )

    rows = verify_codes(all_codes, validator)
    valid_count = sum(1 for row in rows if row["is_valid"] == "True")
    logger.info("Verification complete", total=len(rows), valid=valid_count)

    content = FORMATTERS[output_format](rows)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        click.echo(f"Report written to: {output}")
    else:
        click.echo(content)

    if valid_count != len(rows):
        sys.exit(1)


if __name__ == "__main__":
    main()
