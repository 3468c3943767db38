"""Extraction of calculated-field formulas from a transaction definition.

The document is a JSON object with two optional arrays of field
descriptors, `Fields` (header level) and `LineFields` (line level). A
descriptor only yields a record when it carries a `CalculatedRuleEngine`
with a non-blank `JSFormula`.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from .accessors import get_optional, get_optional_str, get_required_str, get_string_list
from .errors import ParseError
from .records import ExtractedField, Section

logger = logging.getLogger(__name__)

RULE_KEY = 'CalculatedRuleEngine'
FORMULA_KEY = 'JSFormula'
PARTICIPATING_KEY = 'ParticipatingFields'
TRIGGER_PATH = ('CalculatedOn', 'Name')

NO_LABEL = 'No Label'
UNKNOWN_TYPE = 'Unknown'


def load_document(json_text: str) -> Dict[str, Any]:
    try:
        data = json.loads(json_text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object at the root, got {type(data).__name__}.")
    return data


def extract_field(descriptor: Dict[str, Any], section: Section, index: int):
    """Build the record for one field descriptor, or None if it has no formula."""
    context = f"{section.array_key}[{index}]"
    if not isinstance(descriptor, dict):
        raise ParseError(f"{context} must be an object.")

    rule = get_optional(descriptor, RULE_KEY)
    if rule is None:
        return None
    if not isinstance(rule, dict):
        raise ParseError(f"{context}.{RULE_KEY} must be an object.")
    if FORMULA_KEY not in rule:
        return None

    formula = rule[FORMULA_KEY]
    if formula is None:
        return None
    if not isinstance(formula, str):
        raise ParseError(f"{context}.{RULE_KEY}.{FORMULA_KEY} must be a string.")
    formula = formula.strip()
    if not formula:
        return None

    field_id = get_required_str(descriptor, ('FieldID',), context)
    label = get_optional_str(descriptor, 'Label', NO_LABEL)
    field_type = get_optional_str(descriptor, 'Type', UNKNOWN_TYPE)
    participating = get_string_list(rule, PARTICIPATING_KEY, f"{context}.{RULE_KEY}")
    trigger = get_required_str(rule, TRIGGER_PATH, f"{context}.{RULE_KEY} (field {field_id})")

    return ExtractedField(
        section=section,
        field_id=field_id,
        label=label,
        type=field_type,
        trigger=trigger,
        formula=formula,
        participating_fields=participating,
    )


def extract_section(document: Dict[str, Any], section: Section) -> List[ExtractedField]:
    descriptors = document.get(section.array_key)
    if descriptors is None:
        logger.debug("Section %s not present, skipping", section.array_key)
        return []
    if not isinstance(descriptors, list):
        raise ParseError(f"'{section.array_key}' must be an array.")

    fields: List[ExtractedField] = []
    for index, descriptor in enumerate(descriptors):
        field = extract_field(descriptor, section, index)
        if field is None:
            logger.debug("%s[%d] has no formula, skipping", section.array_key, index)
            continue
        fields.append(field)
    return fields


def parse_formula_fields(json_text: str) -> List[ExtractedField]:
    """Parse JSON text into formula records, header fields first.

    Raises ParseError for malformed JSON, a non-object root, or a
    descriptor with a formula but no `FieldID` or `CalculatedOn.Name`.
    """
    document = load_document(json_text)
    fields: List[ExtractedField] = []
    for section in Section:
        fields.extend(extract_section(document, section))
    logger.info("Extracted %d formula fields", len(fields))
    return fields
