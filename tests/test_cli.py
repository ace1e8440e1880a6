"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from resume_builder.cli import build_parser, main
from resume_builder.services.resume_data import ResumeData
from resume_builder.services.resume_store import create_resume

ADA = {
    "personalDetails": {"firstName": "Ada", "lastName": "Lovelace"},
    "skills": [{"name": "Python", "category": "Programming"}],
}


@pytest.fixture
def resume_file(tmp_path: Path) -> Path:
    path = tmp_path / "ada.json"
    path.write_text(json.dumps(ADA), encoding="utf-8")
    return path


def test_render_writes_pdf(
    tmp_path: Path, resume_file: Path, capsys: pytest.CaptureFixture
) -> None:
    out_dir = tmp_path / "out"

    code = main(["render", str(resume_file), "-o", str(out_dir)])

    pdf = out_dir / "Ada_Lovelace_Resume.pdf"
    assert code == 0
    assert pdf.read_bytes().startswith(b"%PDF")
    assert "Ada_Lovelace_Resume.pdf" in capsys.readouterr().out


def test_render_with_filename_override(tmp_path: Path, resume_file: Path) -> None:
    code = main(["render", str(resume_file), "-o", str(tmp_path), "--filename", "cv", "-v"])

    assert code == 0
    assert (tmp_path / "cv.pdf").exists()


def test_render_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    code = main(["render", str(tmp_path / "nope.json"), "-o", str(tmp_path)])

    assert code == 1
    assert "could not read resume data" in capsys.readouterr().out


def test_render_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    assert main(["render", str(path), "-o", str(tmp_path)]) == 1


@pytest.mark.usefixtures("api_db")
def test_render_stored_resume(tmp_path: Path) -> None:
    stored = create_resume(ResumeData.model_validate(ADA))

    code = main(["render", "--id", stored["id"], "-o", str(tmp_path)])

    assert code == 0
    assert (tmp_path / "Ada_Lovelace_Resume.pdf").exists()


@pytest.mark.usefixtures("api_db")
def test_render_unknown_stored_resume(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main(["render", "--id", "missing", "-o", str(tmp_path)]) == 1
    assert "not found" in capsys.readouterr().out


def test_render_requires_a_source() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["render"])


def test_serve_starts_api_server() -> None:
    with patch("resume_builder.api.main.main") as serve:
        code = main(["serve", "--host", "127.0.0.1", "--port", "9000"])

    assert code == 0
    serve.assert_called_once_with(host="127.0.0.1", port=9000, reload=False)
