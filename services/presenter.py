"""
Shopping List Presenter

Display helpers for assembled shopping list rows: quantity formatting,
section ordering, view-mode filtering and grouping. Category order is passed
in rather than read from constants so each app can configure its own.
"""

import math

from constants import DEFAULT_CATEGORY, SECTION_ORDER, UNRANKED_SECTION


def format_qty(qty):
    """Format a quantity for display: two decimals, or a whole number when it is one."""
    if qty is None or not math.isfinite(qty):
        return ''
    # Halves round up
    rounded = math.floor(qty * 100 + 0.5) / 100
    nearest = round(rounded)
    if abs(rounded - nearest) < 1e-9:
        return str(int(nearest))
    return f"{rounded:.2f}"


def qty_text(row):
    """Quantity and unit, e.g. '3 each'; manual rows without a quantity show only the unit."""
    unit = row.unit or ''
    if row.qty is None:
        return unit
    return f"{format_qty(row.qty)} {unit}".strip()


def make_section_rank(order=None):
    """Build a rank function for categories from an ordered list of section names."""
    positions = {}
    for index, name in enumerate(order if order is not None else SECTION_ORDER):
        positions.setdefault(name.lower(), index)

    def section_rank(category):
        return positions.get((category or '').lower(), UNRANKED_SECTION)

    return section_rank


def row_category(row):
    return row.category or DEFAULT_CATEGORY


def visible_rows(rows, mode='prelim', show_cupboard=False):
    """Rows shown in a view mode; 'shop' hides cupboard rows unless asked not to."""
    if mode == 'shop' and not show_cupboard:
        return [row for row in rows if not row.in_cupboard]
    return list(rows)


def sort_rows(rows, rank=None):
    """Sort by section rank, category, trolley rows last, then name."""
    rank = rank or make_section_rank()
    return sorted(rows, key=lambda r: (
        rank(row_category(r)),
        row_category(r),
        r.in_trolley,
        r.name.lower(),
    ))


def group_rows(rows, mode='prelim', show_cupboard=False, rank=None):
    """
    Filter, sort and group rows into display sections.

    Returns a list of {'section': name, 'items': [row, ...]} in section order.
    """
    rank = rank or make_section_rank()
    sections = {}
    for row in sort_rows(visible_rows(rows, mode, show_cupboard), rank):
        sections.setdefault(row_category(row), []).append(row)

    names = sorted(sections, key=lambda name: (rank(name), name))
    return [{'section': name, 'items': sections[name]} for name in names]
