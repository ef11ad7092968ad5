import json

from conftest import A, B, a_talk
from polyface.report import dispatch_summary, render_dispatch_table


def test_dispatch_summary(registry):
    registry.set_implementation(A, "talk", a_talk)
    registry.set_is_object_instance(B, lambda value: False)

    summary = dispatch_summary(registry)

    assert summary["name"] == "Person"
    assert summary["methods"] == ["getFullName", "talk", "walk"]
    assert [c["class"] for c in summary["classes"]] == ["conftest.A", "conftest.B"]

    a_entry, b_entry = summary["classes"]
    assert a_entry["implemented"] == {"talk": "conftest.a_talk"}
    assert a_entry["missing"] == ["getFullName", "walk"]
    assert a_entry["has_instance_predicate"] is False
    assert b_entry["implemented"] == {}
    assert b_entry["has_instance_predicate"] is True
    json.dumps(summary)


def test_render_dispatch_table(people):
    text = render_dispatch_table(people)
    assert text.startswith("Interface: Person\n")
    assert "Methods: getFullName, talk, walk\n" in text
    assert "conftest.A\n" in text
    assert "  talk -> conftest.a_talk\n" in text
    assert "  getFullName -> conftest.c_full_name\n" in text
    assert "not implemented" not in text


def test_render_marks_missing_methods_and_predicates(registry):
    registry.set_is_object_instance(A, lambda value: True)
    text = render_dispatch_table(registry)
    assert "conftest.A  [instance predicate]\n" in text
    assert "  walk -> (not implemented)\n" in text


def test_render_empty_registry(registry):
    text = render_dispatch_table(registry)
    assert "(no registered classes)" in text
