"""
Little Journey knowledge base.

Contains growth reference data:
- WHO Child Growth Standards (0-24 months)
- Singapore growth reference (0-24 months)
- Percentile classification
"""
