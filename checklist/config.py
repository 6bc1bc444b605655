import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import MissingFilePath

ENV_VAR = "CHECKLIST_FILE"


@dataclass(frozen=True)
class Config:
    file_path: Path

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build config from CHECKLIST_FILE. There is no default path."""
        env = os.environ if environ is None else environ
        raw = env.get(ENV_VAR, "").strip()
        if not raw:
            raise MissingFilePath(f"{ENV_VAR} is not set; point it at your checklist file")
        return cls(file_path=Path(raw).expanduser())
