from .writers import WriterConfig, output_paths, write_tables

__all__ = ["WriterConfig", "output_paths", "write_tables"]
