"""
Data models for the product configurator.
"""
from product_configurator.data.models.product import Product, Catalog
from product_configurator.data.models.wizard import Option, QuestionState, EngineResult
