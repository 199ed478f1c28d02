from .darf_extractor import DarfExtractor, parse_darfs, normalize_amount, split_blocks

__all__ = ['DarfExtractor', 'parse_darfs', 'normalize_amount', 'split_blocks']
