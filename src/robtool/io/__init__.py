"""Reading ratings files and exporting tabular summaries."""
