from .json_exporter import JSONExporter

__all__ = ["JSONExporter"]
