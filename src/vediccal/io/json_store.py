import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from ..errors import VedicCalendarError
from ..model.events import CalendarEvent
from ..runtime.store import MemoryCalendarStore

logger = logging.getLogger(__name__)


class JsonCalendarStore(MemoryCalendarStore):
  """
  MemoryCalendarStore persisted to a single JSON file, rewritten atomically
  whenever an event is created, changed or removed.
  """

  def __init__(self, path: str):
    super().__init__()
    self.path = Path(path)
    self._loading = True
    for event in self._read():
      self._events[event.key] = event
    self._loading = False

  def _read(self):
    if not self.path.exists():
      return []
    try:
      raw = json.loads(self.path.read_text(encoding="utf-8"))
      return [CalendarEvent(**e) for e in raw.get("events", [])]
    except (json.JSONDecodeError, AttributeError, TypeError, ValidationError) as e:
      raise VedicCalendarError(f"corrupt event store {self.path}: {e}") from e

  def _on_change(self, new, old):
    super()._on_change(new, old)
    if not self._loading:
      self.flush()

  def flush(self) -> None:
    with self._lock:
      payload = {"events": [e.model_dump(mode="json") for e in self.get_all_events()]}
    self.path.parent.mkdir(parents=True, exist_ok=True)
    tmp = self.path.with_suffix(self.path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    os.replace(tmp, self.path)
    logger.debug("Flushed %d events to %s", len(payload["events"]), self.path)
