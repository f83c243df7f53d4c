"""
Utility modules for SportsCatalog.

Cross-cutting concerns:
- Aggregation: pandas group-and-average helpers over ratings
- Logging setup
"""
