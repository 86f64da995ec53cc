"""
Exporters for configurator results.
"""
from product_configurator.exporters.csv_exporter import CSVExporter
