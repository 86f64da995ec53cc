"""
Data access package for the product configurator.
"""
