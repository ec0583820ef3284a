"""Content records, their loader, and navigation ordering.

Examples
--------
>>> from artia_pages.content import ContentItem, sort_content_items
>>> folder = ContentItem("/f", type="folder", sort_anchor=(5,))
>>> page = ContentItem("/p", type="page", sort_anchor=(1,))
>>> [i.path for i in sort_content_items([page, folder], prioritize_folders=True)]
['/f', '/p']
"""

from .loader import iter_content, load_content_file, load_content_tree
from .models import ContentItem
from .sort import SortOptions, compare_anchors, sort_content_items

__all__ = [
    "ContentItem",
    "SortOptions",
    "compare_anchors",
    "iter_content",
    "load_content_file",
    "load_content_tree",
    "sort_content_items",
]
