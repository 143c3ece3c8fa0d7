import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

WINDOW_SCHEMA = pa.schema([
  ("date", pa.string()),
  ("label", pa.string()),
  ("start", pa.string()),
  ("end", pa.string()),
  ("anchor", pa.string()),
  ("duration_minutes", pa.int32()),
])


def write_windows_parquet(rows_iter: Iterable[dict], path: str) -> int:
  os.makedirs(os.path.dirname(path), exist_ok=True)
  rows = list(rows_iter)
  if not rows:
    return 0
  table = pa.Table.from_pylist(rows, schema=WINDOW_SCHEMA)
  pq.write_table(table, path, compression="snappy")
  return table.num_rows


def read_windows_parquet(path: str) -> list:
  return pq.read_table(path).to_pylist()
