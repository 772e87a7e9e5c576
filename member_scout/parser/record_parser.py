# === FILE: member_scout/parser/record_parser.py ===
"""Member detail card parsing.

A detail page carries one card. The business name sits in a heading inside the
card, the remaining fields live in free-text description blocks such as::

    <div class="socios-descripcion"><b>Teléfono</b> 55 1234 5678</div>

Each field is found by locating its label in a block's text and taking
everything after the label up to the end of that block. The value is **not**
cut at the next label, so a block holding ``Domicilio ... Teléfono ...``
yields an address that still contains the phone part.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Dict, Optional

from member_scout.config import FieldLabels, SelectorConfig
from member_scout.crawler.models import EnterpriseRecord
from member_scout.parser.dom import Markup, find_all_exact, find_exact, joined_text, make_soup

__all__: Sequence[str] = ("extract_enterprise_record", "slice_after_label")

_DEFAULT_SELECTORS = SelectorConfig()
_DEFAULT_LABELS = FieldLabels()


def slice_after_label(text: str, label: str) -> Optional[str]:
    """Trimmed tail of *text* after the first *label*, or None when absent."""
    index = text.find(label)
    if index == -1:
        return None
    return text[index + len(label):].strip()


def extract_enterprise_record(
    markup: Markup,
    selectors: Optional[SelectorConfig] = None,
    labels: Optional[FieldLabels] = None,
) -> Optional[EnterpriseRecord]:
    """Parse the detail card of *markup*; None for pages without one."""
    sel = selectors or _DEFAULT_SELECTORS
    lab = labels or _DEFAULT_LABELS

    card = find_exact(make_soup(markup), sel.card_tag, sel.card_class)
    if card is None:
        return None

    name = "".join(joined_text(h) for h in find_all_exact(card, sel.name_tag, sel.name_class))
    fields: Dict[str, str] = {"name": name.strip()}

    lookups = (
        ("address", lab.address),
        ("phone", lab.phone),
        ("email", lab.email),
        ("contact_person", lab.contact_person),
    )
    for block in find_all_exact(card, sel.description_tag, sel.description_class):
        text = joined_text(block)
        for field_name, label in lookups:
            value = slice_after_label(text, label)
            if value is not None:
                fields[field_name] = value

    return EnterpriseRecord(**fields)
