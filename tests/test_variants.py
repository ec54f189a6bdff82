import pytest
from boundaries import tokenize
from variants import Capitalize, CaseStyle, Strategy, StrategyConfigError, generate_variants, render

ALL_CASES_COVERED = [
    "allCasesCovered",
    "AllCasesCovered",
    "all_cases_covered",
    "all-cases-covered",
    "All_Cases_Covered",
    "ALL_CASES_COVERED",
]

@pytest.mark.parametrize("tokens", [
    ["all", "cases", "covered"],
    ["AlL", "cAsES", "cOvErED"],
    ["ALL", "CASES", "COVERED"],
])
def test_generate_variants(tokens):
    assert generate_variants(tokens) == ALL_CASES_COVERED

def test_variant_order():
    assert [s.label for s in CaseStyle] == [
        "camelCase", "PascalCase", "snake_case", "kebab-case", "Title_Case", "CONSTANT_CASE",
    ]

@pytest.mark.parametrize("index", range(len(CaseStyle)))
@pytest.mark.parametrize("tokens", [
    ["all", "cases", "covered"],
    ["http", "verb"],
    ["some", "value"],
])
def test_variants_are_idempotent(tokens, index):
    variant = generate_variants(tokens)[index]

    assert generate_variants(tokenize(variant))[index] == variant

def test_single_token():
    assert generate_variants(["foo"]) == ["foo", "Foo", "foo", "foo", "Foo", "FOO"]

def test_no_tokens():
    assert generate_variants([]) == [""] * 6

def test_full_unicode_case_mapping():
    assert render(["straße"], CaseStyle.CONSTANT.strategy) == "STRASSE"
    assert render(["ÉCOLE", "NORMALE"], CaseStyle.CAMEL.strategy) == "écoleNormale"

def test_capitalizes_whole_grapheme_clusters():
    # e + combining acute accent
    assert render(["e\u0301cole"], CaseStyle.PASCAL.strategy) == "E\u0301cole"
    assert render(["E\u0301COLE"], CaseStyle.SNAKE.strategy) == "e\u0301cole"

@pytest.mark.parametrize("rule", [
    Capitalize.NO_CHARACTER | Capitalize.FIRST_TOKEN,
    Capitalize.NO_CHARACTER | Capitalize.EVERY_CHARACTER,
    Capitalize.NO_CHARACTER | Capitalize.OTHER_TOKENS | Capitalize.FIRST_TOKEN,
    Capitalize(0),
])
def test_invalid_strategy(rule):
    with pytest.raises(StrategyConfigError):
        Strategy(rule, "_")

def test_custom_strategy():
    dotted = Strategy(Capitalize.FIRST_TOKEN, ".")

    assert render(["all", "cases", "covered"], dotted) == "All.cases.covered"
