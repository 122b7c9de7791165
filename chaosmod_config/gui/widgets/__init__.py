from .check_treeview import CheckTreeView
from .labeled_entry import LabeledEntry

__all__ = ["CheckTreeView", "LabeledEntry"]
