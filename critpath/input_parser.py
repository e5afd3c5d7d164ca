import difflib      # for fuzzy matching of column names
import logging
from pathlib import Path

import pandas as pd

from critpath.errors import InputFormatError, InvalidTaskError
from critpath.models import TaskRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("task", "duration", "dependencies")


def load_file(path):
    """
    input: path to a csv, json, or excel file
    reads file accordingly; raises InputFormatError for an unsupported file format
    output: pandas dataframe
    """
    path = Path(path)
    file_type = path.suffix.lower().lstrip(".") #retrieves extension to get the file format
    readers = {
        "csv": pd.read_csv,
        "json": pd.read_json,
        "xls": pd.read_excel,
        "xlsx": pd.read_excel,
    }
    if file_type not in readers:
        raise InputFormatError(f"Unsupported file type '{path.suffix}'. Use csv, json, xls or xlsx files")
    # keep ids as written ("01" stays "01"): no type guessing on any reader
    if file_type == "csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    elif file_type == "json":
        df = pd.read_json(path, dtype=False)
    else:
        df = readers[file_type](path, dtype=object)
    logger.info(f"Loaded {len(df)} rows from {path.name}")
    return df


def normalize_columns(df):
    """
    input: dataframe straight from a file
    output: copy with lower-case canonical column names (task, duration, dependencies)
    raises InputFormatError when task or duration cannot be found, with close-match hints
    """
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    df.rename(columns=lambda col: alias_map.get(col, col), inplace=True)
    if "dependencies" not in df.columns:
        df["dependencies"] = ""
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        msg = f"Missing required column(s): {', '.join(missing)}" # msg if no close matches
        suggestions = {}
        for col in missing:
            close = difflib.get_close_matches(col, list(df.columns), n=1, cutoff=0.6)
            if close:
                suggestions[col] = close[0]
        if suggestions:
            msg += ". Did you mean: " + ", ".join(f"'{sug}' for '{req}'" for req, sug in suggestions.items())
        raise InputFormatError(msg)
    return df


def cell_to_id(value):
    """
    input: one cell from the task or dependencies column
    output: the id as text; blanks become "", whole numbers lose their ".0" (7.0 → "7")
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_df(df):
    """
    input: dataframe containing task (string), duration (int), and dependencies ("A,B", "-" or blank)
    output: list of TaskRecord in row order
    """
    df = normalize_columns(df)
    if not pd.api.types.is_numeric_dtype(df["duration"]):
        df["duration"] = pd.to_numeric(df["duration"], errors="coerce")
    records = []
    # column by column, so one numeric column never turns the ids into floats
    rows = zip(df["task"].tolist(), df["duration"].tolist(), df["dependencies"].tolist())
    for i, (cell, dur, dep_str) in enumerate(rows, start=1):
        task = cell_to_id(cell)
        if pd.isna(dur):
            raise InvalidTaskError(f"Row {i}: duration of '{task}' is not a number")
        #check for no values in dep; json files may already hold a list of ids
        if isinstance(dep_str, (list, tuple)):
            deps = [cell_to_id(d) for d in dep_str]
        else:
            deps = cell_to_id(dep_str)
        records.append(TaskRecord(task, dur, deps))
    return records


def sample_records():
    """the 14 task demo project: (id, duration, predecessors)"""
    return [
        TaskRecord("A", 2, "-"),
        TaskRecord("B", 6, "K,L"),
        TaskRecord("C", 10, "N"),
        TaskRecord("D", 6, "C"),
        TaskRecord("E", 4, "C"),
        TaskRecord("F", 5, "E"),
        TaskRecord("G", 7, "D"),
        TaskRecord("H", 9, "E,G"),
        TaskRecord("I", 7, "C"),
        TaskRecord("J", 8, "F, I"),
        TaskRecord("K", 4, "J"),
        TaskRecord("L", 5, "J"),
        TaskRecord("M", 2, "H"),
        TaskRecord("N", 4, "A"),
    ]


# == ALIAS MAP FOR SEMANTIC CHECKING ==
alias_map = {
    # task synonyms
    "id": "task",
    "activity": "task",
    "activities": "task",
    "work": "task",
    "job": "task",
    "item": "task",
    "task name": "task",
    "task id": "task",

    # duration synonyms
    "time": "duration",
    "length": "duration",
    "days": "duration",
    "weeks": "duration",
    "period": "duration",
    "estimate": "duration",
    "time req": "duration",
    "time required": "duration",

    # dependencies synonyms
    "dependency": "dependencies",
    "predecessor": "dependencies",
    "predecessors": "dependencies",
    "depends on": "dependencies",
    "required before": "dependencies",
    "precedence": "dependencies",
}
