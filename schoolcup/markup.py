"""HTML fragments for the page. School names are user input and always escaped."""
import html
from typing import Optional

import pandas as pd

from schoolcup.models import Match


def section_header_html(title: str, subtitle: Optional[str] = None) -> str:
    return (
        f"<div class='section'><h3>{html.escape(title)}</h3>"
        + (f"<div class='sub-strip'>{html.escape(subtitle)}</div>" if subtitle else "")
    )


def match_label_html(match: Match) -> str:
    return f"<div class='teams'>{html.escape(match.home)} vs {html.escape(match.away)}</div>"


def styled_table_html(df: pd.DataFrame, font_px: int = 15) -> str:
    styler = df.style.hide(axis="index").format(escape="html")
    styler = styler.set_table_styles([
        {"selector": "thead th",
         "props": [("background","#dbeafe"), ("color","#1e3a8a"), ("font-weight","700"),
                   ("text-align","center"), ("padding","8px 10px"), ("font-size", f"{font_px}px")]},
        {"selector": "tbody td",
         "props": [("padding","8px 10px"), ("font-size", f"{font_px}px"), ("text-align","center"),
                   ("border-bottom","1px solid #eef2f7")]},
        {"selector": "tbody tr:nth-child(even)",
         "props": [("background-color","#f8fafc")]},
    ])
    return styler.to_html()
