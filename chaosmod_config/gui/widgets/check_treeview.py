"""ttk.Treeview showing a :class:`CheckTree` with a ☑/☐ column."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Optional

from ...check_tree import CheckTree

CHECKED = "☑"
UNCHECKED = "☐"


def _item_id(index: int) -> str:
    return f"n{index}"


def _node_index(item_id: str) -> Optional[int]:
    if not item_id.startswith("n"):
        return None
    try:
        return int(item_id[1:])
    except ValueError:
        return None


class CheckTreeView(ttk.Frame):
    def __init__(self, master: tk.Misc, tree: CheckTree, *, open_groups: bool = False):
        super().__init__(master)
        self.model = tree
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self.view = ttk.Treeview(self, columns=("check",), selectmode="browse", show="tree headings")
        self.view.heading("#0", text="Effect", anchor=tk.W)
        self.view.heading("check", text="On", anchor=tk.CENTER)
        self.view.column("#0", width=360, minwidth=200)
        self.view.column("check", width=50, minwidth=40, anchor=tk.CENTER, stretch=False)
        self.view.grid(row=0, column=0, sticky="nsew")

        scroll = ttk.Scrollbar(self, orient=tk.VERTICAL, command=self.view.yview)
        self.view.configure(yscrollcommand=scroll.set)
        scroll.grid(row=0, column=1, sticky="ns")

        self.view.tag_configure("group", font=("TkDefaultFont", 10, "bold"))
        self.view.tag_configure("off", foreground="#757575")

        for root in tree.roots():
            self._insert("", root, open_groups)

        self.view.bind("<Button-1>", self._on_click)
        self.view.bind("<space>", self._on_space)
        tree.subscribe(self._on_model_changed)
        self.bind("<Destroy>", self._on_destroy, add="+")

    def _insert(self, parent_item: str, index: int, open_groups: bool) -> None:
        is_group = not self.model.is_leaf(index)
        self.view.insert(
            parent_item,
            "end",
            iid=_item_id(index),
            text=self.model.label(index),
            values=(self._symbol(index),),
            open=open_groups,
            tags=self._tags(index, is_group),
        )
        for child in self.model.children(index):
            self._insert(_item_id(index), child, open_groups)

    def _symbol(self, index: int) -> str:
        return CHECKED if self.model.is_checked(index) else UNCHECKED

    def _tags(self, index: int, is_group: bool):
        tags = ["group"] if is_group else []
        if not self.model.is_checked(index):
            tags.append("off")
        return tuple(tags)

    def refresh(self) -> None:
        for index in range(len(self.model)):
            self._on_model_changed(index, self.model.is_checked(index))

    def _on_model_changed(self, index: int, _checked: bool) -> None:
        item = _item_id(index)
        if not self.view.exists(item):
            return
        self.view.item(item, values=(self._symbol(index),), tags=self._tags(index, not self.model.is_leaf(index)))

    def _on_click(self, event) -> Optional[str]:
        if self.view.identify_region(event.x, event.y) == "heading":
            return None
        # The disclosure arrow only expands/collapses.
        if self.view.identify_element(event.x, event.y).endswith("indicator"):
            return None
        if self.view.identify_column(event.x) != "#1":
            return None
        index = _node_index(self.view.identify_row(event.y))
        if index is None:
            return None
        self.model.toggle(index)
        return "break"

    def _on_space(self, _event=None) -> Optional[str]:
        sel = self.view.selection()
        if not sel:
            return None
        index = _node_index(sel[0])
        if index is not None:
            self.model.toggle(index)
        return "break"

    def _on_destroy(self, event) -> None:
        if event.widget is self:
            self.model.unsubscribe(self._on_model_changed)
