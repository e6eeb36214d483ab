from __future__ import annotations

from pathlib import Path

import pytest

from gemini_imagegen.cli import run_generate
from gemini_imagegen.common.errors import AuthenticationError


def test_cli_writes_image(fake_gemini, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("GOOGLE_API_KEY", "fake-api-key")
    out = tmp_path / "cli.png"

    run_generate.main(["a lighthouse at dusk", "--output", str(out), "--model", "custom-model"])

    assert out.read_bytes() == b"azertyuiop"
    assert fake_gemini.posts[0][0] == "/models/custom-model:generateContent"
    assert fake_gemini.posts[0][1]["contents"][0]["parts"][0]["text"] == "a lighthouse at dusk"
    assert str(out) in capsys.readouterr().out


def test_cli_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_API_KEY", "k")
    request, settings = run_generate.build_request([])
    assert request.prompt == run_generate.SAMPLE_PROMPT
    assert request.output_path == "output-image.png"
    assert settings.api_key == "k"


def test_cli_unique_output_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_API_KEY", "k")
    request, _ = run_generate.build_request(["p", "--unique"])
    name = Path(request.output_path).name
    assert name.startswith("output-") and name.endswith(".png")


def test_cli_without_key_fails(fake_gemini, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    with pytest.raises(AuthenticationError):
        run_generate.main(["p"])
    assert fake_gemini.clients == []
