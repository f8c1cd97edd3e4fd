import json
import time
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class InputFile:
    """A source file as read from disk; never mutated after reading."""
    path: str
    raw_text: str


@dataclass(frozen=True)
class WrappedEntry:
    path: str
    wrapped_text: str
    length: int

    @classmethod
    def of(cls, path: str, wrapped_text: str) -> 'WrappedEntry':
        return cls(path=path, wrapped_text=wrapped_text, length=len(wrapped_text))


@dataclass(frozen=True)
class Batch:
    """A closed group of wrapped files sent to the backend as one request."""
    entries: Tuple[WrappedEntry, ...]
    char_count: int

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(e.path for e in self.entries)

    @property
    def user_content(self) -> str:
        return ''.join(e.wrapped_text for e in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class BatchResult:
    batch_index: int
    source_paths: Tuple[str, ...]
    generated_text: str

    @property
    def is_empty(self) -> bool:
        return not (self.generated_text or '').strip()


@dataclass
class RunReport:
    """Summary of a generator run, filled in as batches complete."""
    out: str
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files_total: int = 0
    batches_total: int = 0
    batches_written: List[int] = field(default_factory=list)
    batches_skipped: List[int] = field(default_factory=list)
    chars_by_batch: Dict[int, int] = field(default_factory=dict)

    def record(self, result: BatchResult, *, written: bool) -> None:
        (self.batches_written if written else self.batches_skipped).append(result.batch_index)

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "out": self.out,
                "duration_s": self.duration_s,
                "files_total": self.files_total,
                "batches_total": self.batches_total,
                "batches_written": self.batches_written,
                "batches_skipped": self.batches_skipped,
                "chars_by_batch": self.chars_by_batch,
            },
            indent=indent,
        )
