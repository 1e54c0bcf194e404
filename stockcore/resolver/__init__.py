"""Name resolver package.

Resolves a free-text company name to the best record in an in-memory corpus
(exact, substring, then Levenshtein-based similarity). Pure-python, deterministic.
See `stockcore/resolver/core.py`; symbol lookup lives in `tickers.py`.
"""
