"""
PDF result sheet generator.

Renders one calculator run (inputs + result) as a printable sheet.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Title + date
2. Inputs
3. Results (the same cards the API returns)
4. Notes (advisory text lists from the result, if any)
"""

from datetime import datetime

from fpdf import FPDF

from .calculators.registry import get_calculator
from .catalog import get_catalog_entry
from .rendering import format_value


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        str(text)
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .replace("\u03c0", "pi")
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def _label(key: str) -> str:
    """room_length -> Room Length"""
    return key.replace("_", " ").title()


def _input_display(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, (list, tuple)):
        return f"{len(value)} item(s)"
    return format_value(value)


def _advisory_lists(result: dict) -> list:
    """[(heading, [lines])] for every list of strings in the result."""
    sections = []
    for key, value in result.items():
        if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
            sections.append((_label(key), value))
    return sections


class ResultPDF(FPDF):
    """Custom PDF class for calculator result sheets."""

    def __init__(self, app_name=""):
        super().__init__()
        self.app_name = app_name
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Title block is drawn once on the first page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label == "Value" else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        """Render a label/value row. Last column right-aligned."""
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "R" if i == len(widths) - 1 else "L"
            self.cell(width, 5.5, _safe(val), align=align)
        self.ln()


def generate_result_pdf(
    calculator_id: str,
    inputs: dict,
    result: dict,
    created_at: datetime = None,
    app_name: str = "Flooring Calculator",
) -> bytes:
    """
    Generate a PDF result sheet for one calculation.

    Args:
        calculator_id: registry id (e.g. "tile")
        inputs: the validated input fields as sent
        result: the calculator's result dict
        created_at: when the calculation ran (defaults to now)

    Returns:
        PDF bytes

    Raises:
        ValueError: unknown calculator id
    """
    entry = get_catalog_entry(calculator_id)
    calculator = get_calculator(calculator_id)
    when = created_at or datetime.utcnow()

    pdf = ResultPDF(app_name=app_name)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin

    # Title block
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(pw, 10, _safe(entry["title"]), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(100, 100, 100)
    pdf.cell(pw, 5, _safe(app_name), new_x="LMARGIN", new_y="NEXT")
    pdf.cell(pw, 5, when.strftime("%B %d, %Y"), new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    cols = [("Item", 120), ("Value", 70)]
    widths = [w for _, w in cols]

    # Inputs
    pdf.section_header("INPUTS")
    pdf.table_header(cols)
    for key, value in (inputs or {}).items():
        pdf.table_row([_label(key), _input_display(value)], widths)

    # Multi-room entries get their own rows
    for room in (inputs or {}).get("rooms") or []:
        if isinstance(room, dict):
            dims = f"{format_value(room.get('length', 0))} x {format_value(room.get('width', 0))} ft"
            pdf.table_row([f"  {room.get('name', 'Room')}", dims], widths)
    pdf.ln(4)

    # Results
    pdf.section_header("RESULTS")
    pdf.table_header(cols)
    cards = calculator.result_cards(result)
    for card in cards:
        pdf.table_row([card["label"], card["display"]], widths)
    pdf.ln(4)

    # Advisory notes
    for heading, lines in _advisory_lists(result):
        pdf.section_header(heading.upper())
        pdf.set_font("Helvetica", "", 8)
        for line in lines:
            pdf.set_x(pdf.l_margin)
            pdf.multi_cell(pw, 4.5, _safe(f"  - {line}"), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(3)

    pdf.ln(4)
    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.cell(pw, 4, "Estimates only. Verify measurements and manufacturer coverage before ordering.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
