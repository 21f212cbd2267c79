from __future__ import annotations

import pandas as pd
from matplotlib.ticker import FuncFormatter, PercentFormatter

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
}


# ---------- Number formatting ----------
def _group(x: float, decimals: int, thousands: str, decimal: str) -> str:
    s = f"{abs(x):,.{decimals}f}"
    return s.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def fmt_currency(x, currency: str = "USD", decimals: int = 2, thousands: str = ",", decimal: str = ".") -> str:
    """
    Currency string with the symbol for `currency` in front, e.g. 3.5 -> "$3.50".
    Separators are explicit so callers choose the locale convention.
    """
    if pd.isna(x): return ""
    code = currency.upper()
    if code not in CURRENCY_SYMBOLS:
        raise ValueError(f"Unsupported currency {currency!r}; expected one of {sorted(CURRENCY_SYMBOLS)}")
    sign = "-" if x < 0 else ""
    return f"{sign}{CURRENCY_SYMBOLS[code]}{_group(x, decimals, thousands, decimal)}"

def fmt_pct(x, decimals=1):
    """Fraction -> percent string (0.025 -> "2.5%")."""
    if pd.isna(x): return ""
    return f"{x*100:.{decimals}f}%"

def fmt_pct_val(x, decimals=1):
    """When the value is already in percent space (e.g., 2.5 for 2.5%), not as a fraction."""
    if pd.isna(x): return ""
    return f"{x:.{decimals}f}%"

def fmt_num(x, decimals=2):
    if pd.isna(x): return ""
    return f"{x:.{decimals}f}"

def fmt_trend(trend, decimals=2):
    """Arrow + magnitude, e.g. "▲ 1.23%". Zero counts as up."""
    if pd.isna(trend): return ""
    arrow = "▲" if trend >= 0 else "▼"
    return f"{arrow} {abs(trend):.{decimals}f}%"


def format_card_value(value, unit: str, currency: str = "USD") -> str:
    """
    Summary card display value:
    - "$": currency
    - "%": value is in percent points (2.5 -> "2.5%")
    - anything else: two decimals, unit appended when non-empty
    """
    if unit == "$":
        return fmt_currency(value, currency=currency)
    if unit == "%":
        return fmt_pct_val(value, 1)
    text = fmt_num(value, 2)
    return f"{text} {unit}" if unit else text


# For matplotlib axes
def currency_axis(ax, decimals=0, currency="USD"):
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: fmt_currency(v, currency=currency, decimals=decimals)))

def percent_axis(ax, decimals=1):
    ax.yaxis.set_major_formatter(PercentFormatter(xmax=1.0, decimals=decimals))
