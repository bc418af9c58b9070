# Node type definitions, grouped by category, and the registry built from them

from .registry import NODE_TYPE_INFOS, lookup, all_kinds, categories, kinds_in_category

__all__ = ['NODE_TYPE_INFOS', 'lookup', 'all_kinds', 'categories', 'kinds_in_category']
