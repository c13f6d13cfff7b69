from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sg.core.result import Err, Ok, Result
from sg.render.markdown import INDEX_FILE_NAME, MarkdownRenderer, document_file_name
from sg.services.guide import LoadedGuide


@dataclass(frozen=True, slots=True)
class RenderError:
    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class RenderOutcome:
    written: list[Path] = field(default_factory=lambda: [])
    unchanged: list[Path] = field(default_factory=lambda: [])


class RenderService:
    def __init__(self, guide: LoadedGuide) -> None:
        self._guide = guide
        self._renderer = MarkdownRenderer(guide.registry)

    def render(self) -> dict[str, str]:
        """File name -> Markdown text for every output file, in write order."""
        files: dict[str, str] = {}
        for doc in self._guide.documents:
            files[document_file_name(doc)] = self._renderer.render_document(doc)
        files[INDEX_FILE_NAME] = self._renderer.render_index(self._guide.documents)
        return files

    def stale(self, output_dir: Path) -> list[Path]:
        """Output files that are missing or differ from the current render."""
        stale: list[Path] = []
        for name, text in self.render().items():
            path = output_dir / name
            if _read(path) != text.encode("utf-8"):
                stale.append(path)
        return stale

    def write(self, output_dir: Path) -> Result[RenderOutcome, RenderError]:
        """Write every output file, leaving files that are already current untouched."""
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(
                RenderError(
                    f"cannot create output directory {output_dir}: {e}",
                    path=output_dir,
                    hint="pass --out or fix [guide] output in sg.toml",
                )
            )

        outcome = RenderOutcome()
        for name, text in self.render().items():
            path = output_dir / name
            data = text.encode("utf-8")
            if _read(path) == data:
                outcome.unchanged.append(path)
                continue
            try:
                path.write_bytes(data)
            except OSError as e:
                return Err(RenderError(f"cannot write {path}: {e}", path=path))
            outcome.written.append(path)

        return Ok(outcome)


def _read(path: Path) -> bytes | None:
    # compared as bytes: CRLF line endings or a BOM are a difference
    try:
        return path.read_bytes()
    except OSError:
        return None
