"""chromedriver-picker -- resolve Chrome-for-Testing chromedriver download links."""

__version__ = '0.3.0'
