"""Adapters binding the conversion core to BeautifulSoup and AsciiDoc."""
