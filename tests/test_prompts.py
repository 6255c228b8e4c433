"""Tests for the prompt catalog"""
import pytest

from identity_ocr.models import ProfessionType
from identity_ocr.prompts import (
    APEN_INFO_PROMPT,
    INFO_FIELDS,
    INFO_PROMPTS,
    NAME_PROMPT,
    SYSTEM_PROMPT,
    get_info_prompt,
    resolve_profession,
)


@pytest.mark.parametrize("profession", list(ProfessionType))
def test_every_profession_has_a_prompt(profession):
    """Each profession maps to a non-empty prompt"""
    prompt = get_info_prompt(profession)

    assert prompt.strip()
    assert prompt is INFO_PROMPTS[profession]


def test_prompts_are_distinct_per_profession():
    """No two professions share a prompt"""
    prompts = [get_info_prompt(p) for p in ProfessionType]

    assert len(set(prompts)) == len(prompts)


@pytest.mark.parametrize("profession", [None, "", "dentist", "APEN", 42])
def test_unknown_profession_falls_back_to_apen(profession):
    """Unknown or unset professions get the physician prompt"""
    assert get_info_prompt(profession) == APEN_INFO_PROMPT
    assert resolve_profession(profession) is ProfessionType.APEN


def test_string_values_select_prompt():
    """Profession string values are accepted"""
    assert get_info_prompt("nurse") == INFO_PROMPTS[ProfessionType.NURSE]
    assert get_info_prompt("phar") == INFO_PROMPTS[ProfessionType.PHARMACIST]


def test_position_vocabulary_only_for_physicians():
    """Only the physician prompt asks for a position"""
    apen = get_info_prompt(ProfessionType.APEN)

    for token in ('"PGY"', '"Resident"', '"VS"'):
        assert token in apen
    assert "position" not in get_info_prompt(ProfessionType.NURSE)
    assert "position" not in get_info_prompt(ProfessionType.PHARMACIST)


def test_pharmacist_prompt_has_no_department():
    """Pharmacist prompt asks for neither department nor specialty date"""
    prompt = get_info_prompt(ProfessionType.PHARMACIST)

    assert "department" not in prompt
    assert "specialty_valid_date" not in prompt


def test_prompt_business_rules_present():
    """Date format and certificate rules are part of the prompt text"""
    apen = get_info_prompt(ProfessionType.APEN)

    assert "YYYY-MM-DD" in apen
    assert "學生不需要填寫此欄位" in apen
    assert "執業執照不需要填寫此欄位" in apen
    assert "不是「有效日期」" in apen


@pytest.mark.parametrize("profession", list(ProfessionType))
def test_info_fields_match_prompt(profession):
    """Every listed field appears in the profession's JSON template"""
    prompt = get_info_prompt(profession)

    for field_name in INFO_FIELDS[profession]:
        assert f'"{field_name}"' in prompt


def test_name_and_system_prompts():
    """Name prompt asks only for the name; system prompt asks for JSON"""
    assert '"name"' in NAME_PROMPT
    assert "birthday" not in NAME_PROMPT
    assert "JSON" in SYSTEM_PROMPT
    assert "analyzes images" in SYSTEM_PROMPT


def test_prompt_table_is_read_only():
    """The profession to prompt table cannot be modified"""
    with pytest.raises(TypeError):
        INFO_PROMPTS[ProfessionType.APEN] = "other"
