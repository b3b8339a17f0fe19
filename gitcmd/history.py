import json
from pathlib import Path
from typing import Optional, Sequence

from .utils import ensure_dir, file_lock, utc_now


def lock_path(history_file: Path) -> Path:
    return history_file.parent / f"{history_file.name}.lock"


def record_invocation(
    history_file: Path, args: Sequence[str], cwd: Optional[Path], returncode: int
) -> None:
    ensure_dir(history_file.parent)
    entry = {
        "timestamp": utc_now(),
        "args": list(args),
        "cwd": str(cwd) if cwd else None,
        "returncode": returncode,
    }
    with file_lock(lock_path(history_file)):
        with history_file.open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False))
            f.write("\n")


def read_history(history_file: Path) -> list[dict]:
    if not history_file.exists():
        return []
    entries = []
    with history_file.open(encoding="utf-8") as f:
        for line in f:
            stripped = line.strip()
            if stripped:
                entries.append(json.loads(stripped))
    return entries
