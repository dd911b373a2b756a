from __future__ import annotations

import json
from pathlib import Path

import intelligence.llm as llm_module
import main as cli
from intelligence.llm.base import BaseTextProvider


class _CannedText(BaseTextProvider):
    def __init__(self) -> None:
        super().__init__(model="fake-text")
        self.closed = False

    @property
    def provider(self) -> str:
        return "fake"

    async def request_text(self, prompt: str) -> str:
        return '{"headline": "Iltapäivän yllätys", "content": "Kaikki yllättyivät.", "tags": ["yllätys"]}'

    async def aclose(self) -> None:
        self.closed = True


def test_generate_writes_archive_and_prints_report(tmp_path: Path, monkeypatch, capsys) -> None:
    names = tmp_path / "names.json"
    names.write_text(json.dumps(["Aino", "Eero"]), encoding="utf-8")
    archive = tmp_path / "docs" / "news.json"
    provider = _CannedText()
    monkeypatch.setattr(llm_module, "get_text_provider", lambda: provider)

    code = cli.main(
        [
            "generate",
            "--names", str(names),
            "--archive", str(archive),
            "--images-dir", str(tmp_path / "docs" / "images"),
            "--image-policy", "none",
        ]
    )

    assert code == 0
    report = json.loads(capsys.readouterr().out)
    assert report["added"] == 2
    assert report["archive_size"] == 2
    assert provider.closed is True
    assert [record["subject"] for record in json.loads(archive.read_text(encoding="utf-8"))] == ["Aino", "Eero"]


def test_generate_with_empty_names_exits_with_error(tmp_path: Path, monkeypatch) -> None:
    names = tmp_path / "names.json"
    names.write_text("[]", encoding="utf-8")
    monkeypatch.setattr(llm_module, "get_text_provider", lambda: _CannedText())

    code = cli.main(
        [
            "generate",
            "--names", str(names),
            "--archive", str(tmp_path / "news.json"),
            "--image-policy", "none",
        ]
    )

    assert code == 1
    assert not (tmp_path / "news.json").exists()
