from admissions_scrape.coerce import extract_int, extract_money, split_list, normalize_whitespace


def test_extract_int_basic():
    assert extract_int("credits: 120") == 120
    assert extract_int("no numbers here") is None
    assert extract_int(None) is None


def test_extract_int_caps_digit_run_at_five():
    assert extract_int("1234567") == 12345


def test_extract_int_ignores_whitespace_inside_number():
    assert extract_int("1 20 credits") == 120


def test_extract_money_grouping_spaces():
    assert extract_money("Total: 145 000 SEK") == 145000
    assert extract_money("SEK 36\u00a0250") == 36250


def test_extract_money_empty_or_no_digits():
    assert extract_money("") is None
    assert extract_money(None) is None
    assert extract_money("not stated") is None


def test_extract_money_is_whole_units_only():
    # separators are stripped, decimals are not interpreted
    assert extract_money("12.50") == 1250
    assert extract_money("12.500,00") == 1250000


def test_extract_money_out_of_int_range():
    assert extract_money("99 999 999 999 SEK") is None


def test_split_list_mixed_separators():
    assert split_list("Computer Science, AI / Robotics") == ["Computer Science", "AI", "Robotics"]
    assert split_list("a • b ； c;;d|a") == ["a", "b", "c", "d", "a"]


def test_split_list_absent_is_empty():
    assert split_list(None) == []
    assert split_list("   ") == []


def test_normalize_whitespace():
    assert normalize_whitespace("\u00a0 Stockholm \u00a0") == "Stockholm"
    assert normalize_whitespace(" \u00a0 ") is None
    assert normalize_whitespace(None) is None
