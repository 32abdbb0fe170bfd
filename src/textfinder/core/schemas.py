from pathlib import Path
from typing import Iterable, List

from pydantic import BaseModel, Field


class Listing(BaseModel):
    path: str
    is_directory: bool
    count: int = Field(..., ge=0)
    files: List[str]

    @classmethod
    def from_paths(cls, path: Path, paths: Iterable[Path]) -> "Listing":
        files = [str(p) for p in paths]
        return cls(
            path=str(path),
            is_directory=path.is_dir(),
            count=len(files),
            files=files,
        )
