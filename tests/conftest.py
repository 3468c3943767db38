"""Shared pytest fixtures."""
import json

import pytest


def make_field(field_id, label=None, formula="return 1;", trigger="Change", participating=None, **extra):
    field = {"FieldID": field_id}
    if label is not None:
        field["Label"] = label
    rule = {"JSFormula": formula, "CalculatedOn": {"Name": trigger}}
    if participating is not None:
        rule["ParticipatingFields"] = participating
    field["CalculatedRuleEngine"] = rule
    field.update(extra)
    return field


@pytest.fixture
def sample_document():
    return {
        "Fields": [
            {
                "FieldID": "F1",
                "Label": "Net",
                "Type": "Number",
                "CalculatedRuleEngine": {
                    "JSFormula": "return a+b;",
                    "ParticipatingFields": ["a", "b"],
                    "CalculatedOn": {"Name": "Change"},
                },
            },
            {"FieldID": "F2", "Label": "Plain", "CalculatedRuleEngine": None},
            make_field("F3", label="Discount", formula="  return 0.1;\n", trigger="Load"),
        ],
        "LineFields": [
            make_field("L1", label="Total", formula="return q*p;", participating=["q", "p"]),
            {"FieldID": "L2", "Label": "Empty", "CalculatedRuleEngine": {"JSFormula": "   "}},
            make_field("L3", formula="return 2;"),
        ],
    }


@pytest.fixture
def sample_json(sample_document):
    return json.dumps(sample_document)


@pytest.fixture
def input_file(tmp_path, sample_json):
    path = tmp_path / "transaction.json"
    path.write_text(sample_json, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_preferences(tmp_path, monkeypatch):
    """Keep preference reads and writes inside the test's tmp dir."""
    path = tmp_path / "prefs" / "preferences.json"
    monkeypatch.setenv("JS_FORMULA_EXTRACTOR_PREFS", str(path))
    return path
