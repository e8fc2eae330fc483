"""
Spreadsheet decoding for ledger files.

Reads the first sheet of a workbook (or a CSV file) into a plain grid of
cell values. No interpretation happens here; headers stay as the first row
and rows keep whatever length the file gives them.
"""

import csv
import io
import logging
import zipfile
from pathlib import Path
from typing import Any, BinaryIO, List, Optional, Union

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from .errors import SpreadsheetReadError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = {"xlsx"}
CSV_EXTENSIONS = {"csv"}

Grid = List[List[Any]]


def _extension(name: str) -> str:
    return Path(name).suffix.lower().lstrip(".")


def dataframe_to_grid(df: pd.DataFrame) -> Grid:
    """
    Convert a header-less DataFrame into a list of row lists.

    Missing values become None so downstream code never sees NaN.
    """
    cleaned = df.astype(object).where(pd.notna(df), None)
    return [list(row) for row in cleaned.itertuples(index=False, name=None)]


def _read_excel(source: Union[str, Path, BinaryIO]) -> Grid:
    try:
        df = pd.read_excel(source, sheet_name=0, header=None, engine="openpyxl")
    except (zipfile.BadZipFile, InvalidFileException, KeyError, ValueError) as e:
        raise SpreadsheetReadError(f"Could not read workbook: {e}") from e
    return dataframe_to_grid(df)


def _read_csv(source: Union[str, Path, BinaryIO]) -> Grid:
    # Rows may be ragged; empty cells become None like missing Excel cells
    try:
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="utf-8-sig", newline="") as f:
                rows = list(csv.reader(f))
        else:
            text = source.read().decode("utf-8-sig")
            rows = list(csv.reader(io.StringIO(text, newline="")))
    except (UnicodeDecodeError, csv.Error) as e:
        raise SpreadsheetReadError(f"Could not read CSV file: {e}") from e

    return [[cell if cell != "" else None for cell in row] for row in rows]


def load_grid(
    source: Union[str, Path, BinaryIO],
    filename: Optional[str] = None
) -> Grid:
    """
    Load the first sheet of a spreadsheet as a raw grid.

    Args:
        source: File path or binary file-like object
        filename: Name used to pick the reader when source is a buffer

    Returns:
        Rows of raw cell values, header row first

    Raises:
        UnsupportedFileTypeError: If the extension is not xlsx or csv
        SpreadsheetReadError: If the file content cannot be decoded
    """
    name = filename or (str(source) if isinstance(source, (str, Path)) else "")
    extension = _extension(name)

    if extension in EXCEL_EXTENSIONS:
        grid = _read_excel(source)
    elif extension in CSV_EXTENSIONS:
        grid = _read_csv(source)
    else:
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{extension or name}'. Expected one of: xlsx, csv"
        )

    logger.debug("Loaded %d rows from %s", len(grid), name or "buffer")
    return grid
