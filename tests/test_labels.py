from bs4 import BeautifulSoup

from admissions_scrape.labels import get_by_label, pick_first_text, scan_by_label_in_text, coalesce, card_text
from admissions_scrape.markup import TOTAL_TUITION_FEE_TEXT_RE


def _card(html: str):
    return BeautifulSoup(html, 'lxml').select_one('.card')


def test_definition_list_pair():
    card = _card('<div class="card"><dl><dt>Period</dt><dd>Autumn 2025</dd></dl></div>')
    assert get_by_label(card, "Period") == "Autumn 2025"


def test_definition_term_with_colon():
    card = _card('<div class="card"><dl><dt>Period:</dt><dd> Spring 2026 </dd></dl></div>')
    assert get_by_label(card, "Period") == "Spring 2026"


def test_inline_label_value_cut_at_pipe():
    card = _card('<div class="card"><p>Period: Autumn 2025 | Pace: 100%</p></div>')
    assert get_by_label(card, "Period") == "Autumn 2025"
    assert get_by_label(card, "Pace of study|Pace") == "100%"


def test_inline_prefers_innermost_element():
    card = _card('''
    <div class="card">
      <div class="details">
        <p>Level: Second-cycle</p>
        <p>Language of instruction: English</p>
      </div>
    </div>''')
    assert get_by_label(card, "Level") == "Second-cycle"
    assert get_by_label(card, "Language of instruction") == "English"


def test_inline_label_in_child_span():
    card = _card('<div class="card"><div><span>Period:</span> Autumn 2025</div></div>')
    assert get_by_label(card, "Period") == "Autumn 2025"


def test_label_is_case_insensitive():
    card = _card('<div class="card"><p>APPLICATION CODE: SU-12345</p></div>')
    assert get_by_label(card, "Application code") == "SU-12345"


def test_missing_label_is_none():
    card = _card('<div class="card"><p>Period: Autumn 2025</p></div>')
    assert get_by_label(card, "Teaching form") is None


def test_label_with_blank_value_is_none():
    card = _card('<div class="card"><p>Period: | Pace: 50%</p></div>')
    assert get_by_label(card, "Period") is None


def test_pick_first_text_declaration_order():
    card = _card('<div class="card"><h2>Second</h2><h3> </h3><h3>First</h3></div>')
    assert pick_first_text(card, ".missing", "h3", "h2") == "First"
    assert pick_first_text(card, ".missing") is None


def test_scan_by_label_in_text():
    text = "Data Science\nTotal tuition fee: 290 000 SEK"
    assert scan_by_label_in_text(text, TOTAL_TUITION_FEE_TEXT_RE) == "290 000"
    assert scan_by_label_in_text(text, r"scope\s+(\d+)") is None
    assert scan_by_label_in_text(None, r"(x)") is None


def test_coalesce_first_non_blank():
    assert coalesce(None, "  ", "x", "y") == "x"
    assert coalesce(None, "") is None


def test_card_text_one_line_per_node():
    card = _card('<div class="card">Data Science<br>120 Credits,   Lund University</div>')
    assert card_text(card) == "Data Science\n120 Credits, Lund University"


def test_inline_label_must_open_a_field():
    card = _card('<div class="card"><p>Application period: 1 Oct - 15 Jan</p><p>Pace: 50% | Period: Autumn 2025</p></div>')
    assert get_by_label(card, "Period") == "Autumn 2025"
    card = _card('<div class="card"><p>Application period: 1 Oct - 15 Jan</p></div>')
    assert get_by_label(card, "Period") is None
