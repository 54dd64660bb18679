"""Plain-English date range parsing.

The parser converts a phrase such as "this week", "past 2 months" or "the 3rd of next month" into
an inclusive `(begin, end)` pair of datetimes, anchored to an injectable "current moment".
"""
