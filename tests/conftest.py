import json
import sys
from datetime import date
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvwork.content import Text
from cvwork.shared import WorkExperience


@pytest.fixture
def lemonade_stand():
    """A fully populated experience."""
    return WorkExperience(
        position="Owner",
        company="Lemonade Stand LLC",
        location="5th St.",
        start=date(2042, 1, 1),
        end=date(2043, 6, 30),
        body=Text("Sold lemonade."),
    )


@pytest.fixture
def section_data():
    """Section JSON with one named and two positional entries."""
    return {
        "title": "Experience",
        "named": {
            "current": {
                "position": "Owner",
                "company": "Lemonade Stand LLC",
                "start": {"date": "2042-01-01"},
                "body": "Sold lemonade.",
            },
        },
        "entries": [
            {
                "position": "Intern",
                "company": "Paper Route Inc.",
                "location": "Elm St.",
                "start": "Summer 2040",
                "end": "Fall 2040",
                "body": {"list": ["Delivered papers.", "Collected fees."]},
            },
            {
                "company": "Garage Band",
                "body": ["Played ", {"emph": "drums"}, "."],
            },
        ],
    }


@pytest.fixture
def make_section_json(tmp_path: Path):
    def _make(data: dict, name: str = "section.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _make
