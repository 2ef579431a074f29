# tests/conftest.py
from pathlib import Path

import pytest

from .samples import SAMPLE_SRT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """開発者の環境変数 SRTSHIFT_* がテストに影響しないようにする"""
    monkeypatch.delenv("SRTSHIFT_ENCODING", raising=False)
    monkeypatch.delenv("SRTSHIFT_LOG_LEVEL", raising=False)


@pytest.fixture
def srt_file(tmp_path: Path) -> Path:
    path = tmp_path / "movie.srt"
    path.write_text(SAMPLE_SRT, encoding="utf-8")
    return path
