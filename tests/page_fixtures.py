"""Synthetic Scholar profile markup for tests."""

from __future__ import annotations

from bs4 import BeautifulSoup


def summary_table_html(cells: list[str]) -> str:
    rows = "".join(
        f'<tr><td class="gsc_rsb_sc1"><a class="gsc_rsb_f">Metric {i}</a></td>'
        f'<td class="gsc_rsb_std">{cell}</td><td class="gsc_rsb_std">0</td></tr>'
        for i, cell in enumerate(cells)
    )
    return (
        '<table id="gsc_rsb_st"><thead><tr><th></th><th class="gsc_rsb_sth">All</th>'
        '<th class="gsc_rsb_sth">Since 2019</th></tr></thead>'
        f"<tbody>{rows}</tbody></table>"
    )


def histogram_html(years: list[str], counts: list[str]) -> str:
    year_spans = "".join(f'<span class="gsc_g_t">{y}</span>' for y in years)
    bars = "".join(
        f'<a href="javascript:void(0)" class="gsc_g_a"><span class="gsc_g_al">{c}</span></a>'
        for c in counts
    )
    return f'<div class="gsc_md_hist_w"><div class="gsc_md_hist_b">{year_spans}{bars}</div></div>'


def profile_html(
    cells: list[str] | None = None,
    name: str | None = "Jane Doe",
    years: list[str] | None = None,
    counts: list[str] | None = None,
    with_table: bool = True,
    with_histogram: bool = True,
) -> str:
    cells = ["120", "8", "5"] if cells is None else cells
    years = ["2020", "2021"] if years is None else years
    counts = ["30", "40"] if counts is None else counts

    parts = ["<html><body>"]
    if name is not None:
        parts.append(f'<div id="gsc_prf_i"><div id="gsc_prf_in">{name}</div></div>')
    if with_table:
        parts.append(summary_table_html(cells))
    if with_histogram:
        parts.append(histogram_html(years, counts))
    parts.append("</body></html>")
    return "".join(parts)


def profile_document(**kwargs) -> BeautifulSoup:
    return BeautifulSoup(profile_html(**kwargs), "html.parser")
