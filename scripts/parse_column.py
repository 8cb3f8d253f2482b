#!/usr/bin/env python3
"""Parse one numeric column of a CSV file and report what was inferred."""
import csv
import json
import sys
from pathlib import Path

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from numeric_ingestion.config import Settings
from numeric_ingestion.ingestion.column_parser import parse_column
from numeric_ingestion.models.literal import NumericWidth
from numeric_ingestion.utils.logging import configure_from_settings


def main(csv_path: str, column: str, width: NumericWidth | None = None) -> None:
    """Parse *column* of the CSV at *csv_path* and print a summary."""
    path = Path(csv_path)
    if not path.exists():
        print(f"Error: File not found: {csv_path}")
        sys.exit(1)

    settings = Settings()
    configure_from_settings(settings)

    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or column not in reader.fieldnames:
            print(f"Error: Column {column!r} not found in {path.name}")
            sys.exit(1)
        cells = [row[column] for row in reader]

    print(f"Parsing: {path.name} [{column}]")
    print("-" * 50)

    report = parse_column(cells, width=width, column=column, settings=settings)

    print(f"Rows: {report.row_count}")
    print(f"Width: {report.width}")
    print(f"Failures: {len(report.failures)} ({report.failure_ratio:.2%})")
    print(f"Dominant convention: {report.dominant_convention or 'n/a'}")
    if report.has_mixed_conventions:
        print("Warning: column mixes decimal points and decimal commas")

    for failure in report.failures[:10]:
        print(f"  row {failure.row_index}: {failure.raw!r} -> {failure.error}")

    output_path = path.with_suffix(f".{column}.json")
    with open(output_path, "w") as f:
        json.dump(report.model_dump(mode="json"), f, indent=2, default=str)
    print(f"\nFull report saved to: {output_path}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python scripts/parse_column.py <path-to-csv> <column> [decimal|float32|float64]")
        sys.exit(1)

    main(sys.argv[1], sys.argv[2], NumericWidth(sys.argv[3]) if len(sys.argv) > 3 else None)
