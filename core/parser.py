"""
Legal document metadata parser module.

Parses document date, title, author (court, law firm or lawyer) and case
number from the flat text of a Korean legal PDF. Every field is a
best-effort heuristic; no extractor ever fails, each falls back to a
marker value instead.
"""

import logging
import re
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)


NO_TITLE = '제목없음'
UNKNOWN_AUTHOR = '작성자미상'

# Window sizes for fields printed at a predictable end of the document
AUTHOR_TAIL_CHARS = 1000
CASE_NUMBER_HEAD_CHARS = 500

# Regex for date pattern: 2026. 2. 10. / 2026년 2월 10일
DATE_PATTERN = re.compile(
    r'([0-9]{4})\s*[.년]\s*([0-9]{1,2})\s*[.월]\s*([0-9]{1,2})\s*[.일]?'
)

# A line holding nothing but a page number, e.g. "- 3 -" or "[12]"
PAGE_NUMBER_PATTERN = re.compile(r'[-_=\[\]\s]*[0-9]+[-_=\[\]\s]*')

WHITESPACE_PATTERN = re.compile(r'\s+')

# Titles of court-issued documents, often printed spaced out ("결    정")
COURT_TITLES = frozenset(['결정', '판결', '명령', '이행권고결정', '화해권고결정'])
COURT_TITLE_SCAN_LINES = 10

# Keywords of lawyer-drafted filings, found in the caption line
FILING_KEYWORDS = (
    '소장', '답변서', '준비서면', '신청서', '청구취지',
    '변경신청', '항소장', '상고장', '가압류',
)
FILING_KEYWORD_SCAN_LINES = 5
FILING_TITLE_MAX_LENGTH = 30

FALLBACK_TITLE_LENGTH = 20

# 수원지방법원, 서울고등법원, 수원지방법원 안산지원 written as one word
COURT_PATTERN = re.compile(
    r'[가-힣]+(?:지방|고등|가정|행정|회생)법원(?:[가-힣]*지원)?'
)
LAW_FIRM_PATTERN = re.compile(r'법무법인\s*([가-힣]+)')
LAWYER_PATTERN = re.compile(r'변호사\s*([가-힣]{2,4})')

# 2026카단500796, 2024가합1234
CASE_NUMBER_PATTERN = re.compile(r'[0-9]{4}[가-힣]{1,3}[0-9]+')


Rule = Callable[..., Optional[str]]


@dataclass(frozen=True)
class DocumentMetadata:
    """Metadata parsed from one legal document."""
    date: str  # YYMMDD
    title: str
    author: str
    case_number: Optional[str] = None

    def with_default_case_number(self, default: str) -> "DocumentMetadata":
        """Fill in `default` when no case number was found in the text."""
        if self.case_number or not default:
            return self
        return replace(self, case_number=default)


def _first_match(rules: Sequence[Rule], subject) -> Optional[str]:
    """Apply rules in order and return the first non-None result."""
    for rule in rules:
        result = rule(subject)
        if result is not None:
            return result
    return None


def _strip_whitespace(line: str) -> str:
    return WHITESPACE_PATTERN.sub('', line)


# ---------------------------------------------------------------------------
# Date
# ---------------------------------------------------------------------------

def extract_date(text: str, today: Optional[date] = None) -> str:
    """
    Extract the document date as YYMMDD.

    Only the first date in the text is used, and month/day are passed
    through without range checks. Falls back to today's date.

    Args:
        text: Extracted PDF text.
        today: Date to fall back to (defaults to date.today()).
    """
    match = DATE_PATTERN.search(text)

    if match:
        year, month, day = match.groups()
        return f"{year[2:]}{month.zfill(2)}{day.zfill(2)}"

    logger.debug("No date found, using today's date")
    return (today or date.today()).strftime("%y%m%d")


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

def _content_lines(text: str) -> list[str]:
    """Non-empty stripped lines, without page-number decoration."""
    lines = (line.strip() for line in text.split('\n'))
    return [
        line for line in lines
        if line and not PAGE_NUMBER_PATTERN.fullmatch(line)
    ]


def match_court_title(lines: Sequence[str]) -> Optional[str]:
    """Court short title ("결 정", "판 결", ...) in the first lines."""
    for line in lines[:COURT_TITLE_SCAN_LINES]:
        collapsed = _strip_whitespace(line)
        if collapsed in COURT_TITLES:
            return collapsed
    return None


def match_filing_title(lines: Sequence[str]) -> Optional[str]:
    """Short caption line containing a filing keyword."""
    for line in lines[:FILING_KEYWORD_SCAN_LINES]:
        if len(line) < FILING_TITLE_MAX_LENGTH and any(k in line for k in FILING_KEYWORDS):
            return _strip_whitespace(line)
    return None


def fallback_title(lines: Sequence[str]) -> Optional[str]:
    """Beginning of the first line."""
    if not lines:
        return None
    return _strip_whitespace(lines[0][:FALLBACK_TITLE_LENGTH])


TITLE_RULES = (match_court_title, match_filing_title, fallback_title)


def extract_title(text: str) -> str:
    """
    Extract a short document title from the first lines of text.

    Court titles win over filing keywords, which win over the plain
    first line. Returns NO_TITLE when the text has no content lines.
    """
    lines = _content_lines(text)
    return _first_match(TITLE_RULES, lines) or NO_TITLE


# ---------------------------------------------------------------------------
# Author
# ---------------------------------------------------------------------------

def match_court(tail: str) -> Optional[str]:
    match = COURT_PATTERN.search(tail)
    return match.group(0) if match else None


def match_law_firm(tail: str) -> Optional[str]:
    match = LAW_FIRM_PATTERN.search(tail)
    return f"법무법인{match.group(1)}" if match else None


def match_lawyer(tail: str) -> Optional[str]:
    match = LAWYER_PATTERN.search(tail)
    return match.group(1) if match else None


AUTHOR_RULES = (match_court, match_law_firm, match_lawyer)


def extract_author(text: str) -> str:
    """
    Extract the issuing court, law firm or lawyer.

    Only the end of the document is searched, where the signature block
    is printed. Falls back to UNKNOWN_AUTHOR.
    """
    tail = text[-AUTHOR_TAIL_CHARS:]
    return _first_match(AUTHOR_RULES, tail) or UNKNOWN_AUTHOR


# ---------------------------------------------------------------------------
# Case number
# ---------------------------------------------------------------------------

def extract_case_number(text: str) -> Optional[str]:
    """Docket number (year + case type + sequence) near the top, or None."""
    match = CASE_NUMBER_PATTERN.search(text[:CASE_NUMBER_HEAD_CHARS])
    return match.group(0) if match else None


class LegalDocumentParser:
    """
    Parses all metadata fields from extracted PDF text.

    Parsing Rules:
    1. Date: first "YYYY. M. D." / "YYYY년 M월 D일" anywhere, else today
    2. Title: court title, then filing caption, then first line
    3. Author: court, then law firm, then lawyer, in the last 1000 chars
    4. Case number: "2026카단500796" style in the first 500 chars
    """

    def __init__(self, today: Optional[date] = None):
        self.today = today

    def parse(self, text: str) -> DocumentMetadata:
        """
        Parse document metadata from extracted PDF text.

        Args:
            text: Extracted text from PDF.

        Returns:
            DocumentMetadata with every field filled in except possibly
            case_number.
        """
        logger.debug(f"Parsing metadata from {len(text)} characters")

        metadata = DocumentMetadata(
            date=extract_date(text, self.today),
            title=extract_title(text),
            author=extract_author(text),
            case_number=extract_case_number(text),
        )

        logger.debug(f"Parse complete: case_number_found={metadata.case_number is not None}")
        return metadata
