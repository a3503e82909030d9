"""Markdown table rendering for manifest data.

A table is a list of rows, each row a list of text cells, the first
row being the header. An empty list renders as a placeholder.
"""

# Rendered in place of a table with no rows
NO_DATA = "**No data**"

Row = list[str]
Table = list[Row]
