import csv


def split_csv_line(line: str) -> list[str]:
    """Quote-aware split of a single CSV line.

    Commas inside quotes are kept, a doubled quote inside a quoted field
    becomes one literal quote.
    """
    return next(csv.reader([line], skipinitialspace=False, strict=False), [])
