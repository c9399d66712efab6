import os
import json
from typing import Any, Dict


def settings_dir() -> str:
    """
    %APPDATA%/KeySmith on Windows; fallback to ~/.keysmith elsewhere.
    """
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "KeySmith")
    return os.path.join(os.path.expanduser("~"), ".keysmith")


def ensure_dir_exists(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def atomic_write_bytes(path: str, data: bytes) -> None:
    """
    Atomically write bytes to 'path' by writing to a temp file and renaming.
    """
    ensure_dir_exists(path)
    tmp = path + ".tmp"
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


def read_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def dump_json_bytes(obj: Dict[str, Any]) -> bytes:
    return json.dumps(obj, ensure_ascii=False, indent=2).encode("utf-8")
