"""
Catalog Registry Module.

Single owner of all catalog state: activities, categories, products and ratings.
"""
