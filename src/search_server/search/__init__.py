"""
TF-IDF search package.

- analyzers: Space tokenizer and stop-word filter
- models: Statuses, result records and parsed queries
- stats: TF, IDF and rating helpers
- index: Inverted index and document metadata
- query: Plus/minus query parser
- ranking: TF-IDF ranker and predicate adapters
- matcher: Per-document query matching
"""
