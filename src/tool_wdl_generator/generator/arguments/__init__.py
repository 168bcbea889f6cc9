"""Argument model handed over by the upstream argument extractor."""
