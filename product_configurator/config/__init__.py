"""
Configuration package for the product configurator.
"""
