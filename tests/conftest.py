import json
from pathlib import Path

import pytest

from utils.settings_store import CalogenSettings


TEMPLATE = (
    "{{HEADER}}# {{version}}\n{{/HEADER}}"
    "{{BREAKINGCHANGESHEADER}}## Breaking\n{{/BREAKINGCHANGESHEADER}}"
    "{{BREAKINGCHANGESLOG}}- {{title}}: {{description}}\n{{/BREAKINGCHANGESLOG}}"
    "{{LOGHEADER}}## Changes\n{{/LOGHEADER}}"
    "{{LOG}}- [{{type}}] {{title}} ({{bugNo}})\n{{/LOG}}"
    "{{FOOTER}}\n{{/FOOTER}}"
)


@pytest.fixture
def template() -> str:
    return TEMPLATE


@pytest.fixture
def settings() -> CalogenSettings:
    return CalogenSettings(
        logsFolderPath="./logs",
        types={"b": "bug-fix", "f": "feature"},
        defaultValues={"version": "Next Release"},
    )


def write(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = data if isinstance(data, str) else json.dumps(data, indent=4)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project with calogen.json, a template and two contributor files."""
    write(tmp_path / "calogen.json", {
        "logsFolderPath": "./docs/changelogs",
        "types": {"b": "bug-fix", "f": "feature"},
        "defaultValues": {"version": "Next Release"},
    })
    logs = tmp_path / "docs" / "changelogs"
    write(logs / "template.md", TEMPLATE)
    write(logs / "alice.json", [
        {"type": "f", "isBreakingChange": False, "title": "Zebra fix", "description": "z", "bugNo": "2", "bugLink": "l2"},
        {"type": "b", "isBreakingChange": False, "title": "Old fix", "description": "o", "bugNo": "1", "bugLink": "l1", "version": "1.0.0"},
    ])
    write(logs / "bob.json", [
        {"type": "f", "isBreakingChange": True, "title": "API change", "description": "removed foo", "bugNo": "3", "bugLink": "l3"},
        {"type": "b", "isBreakingChange": False, "title": "Alpha fix", "description": "a", "bugNo": "4", "bugLink": "l4"},
    ])
    return tmp_path
