"""Script wrapper for filtering a tokenized corpus.

Use the packaged CLI instead:
    python -m stopword_filter.cli filter
or install the package and run `stopword-filter filter`.
"""

from stopword_filter.cli import filter_cli


if __name__ == "__main__":
    filter_cli()
