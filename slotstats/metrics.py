import pandas as pd
from typing import Dict, Iterable, List, Mapping, Optional

from .stats import EmptyInput, Summary, compute_summary

_FIELDS: List[str] = list(Summary.__dataclass_fields__)


def describe(series: Iterable[float]) -> Dict[str, Optional[float]]:
    """Summary as a dict; an empty series maps every field to None."""
    try:
        return compute_summary(series).as_dict()
    except EmptyInput:
        return {k: None for k in _FIELDS}


def summary_dataframe(named: Mapping[str, Iterable[float]]) -> pd.DataFrame:
    """One row per named sample set, one column per Summary field."""
    rows = {name: compute_summary(samples).as_dict() for name, samples in named.items()}
    df = pd.DataFrame.from_dict(rows, orient="index", columns=_FIELDS)
    df.index.name = "name"
    return df
