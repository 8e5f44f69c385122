"""Test suite for the risk-of-bias assessment tool.

Unit tests cover the checklist catalog, scoring, classification,
aggregation, the study registry and file loading; integration tests
exercise a full scoring session and the command line.  To run the
tests, execute `pytest` from the project root.
"""
