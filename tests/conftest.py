"""Shared test fixtures."""

from pathlib import Path
from typing import Dict, Union

import pytest

from core import ExtractionError, RenameConfig

CLIENT = "주식회사준"
OPPONENT = "세움엔키움주식회사"

COMPLAINT_TEXT = "2026. 2. 10.\n소장\n...\n법무법인가나\n"

DECISION_TEXT = (
    "수원지방법원\n"
    "결    정\n"
    "사건 2026카단500796 부동산가압류\n"
    "채권자 주식회사준\n"
    "채무자 세움엔키움주식회사\n"
    "주 문\n"
    "채무자 소유의 별지 목록 기재 부동산을 가압류한다.\n"
    "- 1 -\n"
    "2026. 3. 4.\n"
    "판사 홍길동\n"
    "수원지방법원안산지원\n"
)


class FakeTextSource:
    """Stands in for PDFExtractor, keyed by file name."""

    def __init__(self, texts: Dict[str, Union[str, Exception]]):
        self.texts = texts
        self.calls = []

    def extract_text(self, pdf_path) -> str:
        pdf_path = Path(pdf_path)
        self.calls.append(pdf_path.name)
        text = self.texts[pdf_path.name]
        if isinstance(text, Exception):
            raise ExtractionError(pdf_path, text)
        return text


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of RenameConfig."""
    for name in ["TARGET_FOLDER", "CLIENT_NAME", "OPPONENT_NAME", "DEFAULT_CASE_NUM"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config(tmp_path) -> RenameConfig:
    """Config pointing at an empty temporary folder."""
    return RenameConfig(
        client_name=CLIENT,
        opponent_name=OPPONENT,
        target_folder=tmp_path,
    )


def make_pdf(folder: Path, name: str, content: bytes = b"%PDF-1.4 placeholder") -> Path:
    path = folder / name
    path.write_bytes(content)
    return path
