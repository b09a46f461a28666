from __future__ import annotations

from pathlib import Path
from typing import Any, List

import plotly.graph_objects as go
import pytest


@pytest.fixture
def fake_write_image(monkeypatch: pytest.MonkeyPatch) -> List[dict[str, Any]]:
    """Replace kaleido export with a stub that writes a tiny placeholder file."""
    calls: List[dict[str, Any]] = []

    def _write_image(self: go.Figure, file: Any, format: Any = None, **kwargs: Any) -> None:
        calls.append({"file": str(file), "format": format, **kwargs})
        Path(file).write_text(f"<{format or 'image'} placeholder/>", encoding="utf-8")

    monkeypatch.setattr(go.Figure, "write_image", _write_image)
    return calls
