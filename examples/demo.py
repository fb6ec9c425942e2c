"""Demo script: load formaldehyde from a MOL file and export all formats."""

from pathlib import Path

from kekule import ExportFormat, ExportRequest, parse_molfile, run_export

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"
OUTPUT = Path(__file__).resolve().parent


def main():
    source = FIXTURES / "formaldehyde.mol"
    molecule = parse_molfile(source)
    print(f"Loaded {molecule.title!r}: {len(molecule)} atoms")

    for fmt in ExportFormat:
        result = run_export(ExportRequest(
            format=fmt,
            molecule=molecule,
            source_text=source.read_text(),
            show_hydrogens=True,
        ))
        out = OUTPUT / result.filename
        out.write_text(result.text)
        print(f"Wrote {out} ({result.mime_type}, {len(result.text)} characters)")


if __name__ == "__main__":
    main()
