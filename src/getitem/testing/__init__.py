from .corpus import generate_table, generate_tables, write_corpus_files

__all__ = ["generate_table", "generate_tables", "write_corpus_files"]
