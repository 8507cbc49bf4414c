"""
dom_signals.py - Element counts used by the functional and usability checks.

Usage:
    counts = count_elements(page.content())
"""

from bs4 import BeautifulSoup


def count_elements(html: str) -> dict:
    soup = BeautifulSoup(html or "", "html.parser")
    title = soup.title.get_text(strip=True) if soup.title else ""
    return {
        "links": len(soup.find_all("a")),
        "forms": len(soup.find_all("form")),
        "buttons": len(soup.find_all("button")),
        "images": len(soup.find_all("img")),
        "has_title": bool(title),
    }
