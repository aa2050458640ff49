import pytest

from utils.template_regions import (
    REGION_NAMES,
    MissingRegionError,
    extract_fragments,
    extract_region,
)


def test_extract_region_returns_text_between_markers():
    tpl = "before{{HEADER}}# {{version}}\n{{/HEADER}}after"
    assert extract_region(tpl, "HEADER") == "# {{version}}\n"


def test_extract_region_keeps_whitespace_verbatim():
    tpl = "{{FOOTER}}\n\n  ---\n{{/FOOTER}}"
    assert extract_region(tpl, "FOOTER") == "\n\n  ---\n"


def test_log_and_logheader_do_not_collide(template):
    assert extract_region(template, "LOG") == "- [{{type}}] {{title}} ({{bugNo}})\n"
    assert extract_region(template, "LOGHEADER") == "## Changes\n"


def test_header_and_breaking_header_do_not_collide(template):
    assert extract_region(template, "HEADER") == "# {{version}}\n"
    assert extract_region(template, "BREAKINGCHANGESHEADER") == "## Breaking\n"


def test_region_order_does_not_matter():
    bodies = {name: f"<{name.lower()}>" for name in REGION_NAMES}
    forward = "".join("{{%s}}%s{{/%s}}" % (n, bodies[n], n) for n in REGION_NAMES)
    backward = "".join("{{%s}}%s{{/%s}}" % (n, bodies[n], n) for n in reversed(REGION_NAMES))
    for name in REGION_NAMES:
        assert extract_region(forward, name) == bodies[name]
        assert extract_region(backward, name) == bodies[name]


def test_extraction_is_idempotent(template):
    assert extract_fragments(template) == extract_fragments(template)


def test_missing_open_marker_raises():
    with pytest.raises(MissingRegionError) as exc:
        extract_region("{{LOG}}x{{/LOG}}", "FOOTER")
    assert exc.value.region == "FOOTER"
    assert exc.value.code == "MISSING_REGION"
    assert "FOOTER" in str(exc.value)


def test_missing_close_marker_raises():
    with pytest.raises(MissingRegionError) as exc:
        extract_region("{{FOOTER}}unterminated", "FOOTER")
    assert exc.value.region == "FOOTER"


def test_close_marker_before_open_marker_is_not_used():
    with pytest.raises(MissingRegionError):
        extract_region("{{/FOOTER}}{{FOOTER}}x", "FOOTER")


def test_extract_fragments_fails_on_any_missing_region(template):
    broken = template.replace("{{/LOGHEADER}}", "")
    with pytest.raises(MissingRegionError) as exc:
        extract_fragments(broken)
    assert exc.value.region == "LOGHEADER"
