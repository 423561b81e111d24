"""Row selection for the products table."""


class SelectionTracker:
    """Maps product id -> selected flag for rows that have been on screen.

    Only ids that appeared in a loaded page are ever recorded, so bulk actions
    never act on an id the user could not have seen.
    """

    def __init__(self):
        self._selected: dict[str, bool] = {}
        self._visible: list[str] = []
        self._known: set[str] = set()

    def show_page(self, ids) -> None:
        """Register the ids of the rows currently rendered."""
        self._visible = [str(i) for i in ids]
        self._known.update(self._visible)

    @property
    def visible_ids(self) -> list[str]:
        return list(self._visible)

    def toggle_all(self, checked: bool) -> None:
        for pid in self._visible:
            self._selected[pid] = checked

    def toggle_one(self, product_id: str, checked: bool) -> None:
        pid = str(product_id)
        if pid not in self._known:
            return
        self._selected[pid] = checked

    def is_selected(self, product_id: str) -> bool:
        return self._selected.get(str(product_id), False)

    def selected_ids(self) -> set[str]:
        return {pid for pid, checked in self._selected.items() if checked}

    def bulk_ids(self) -> list[str]:
        """Selected ids restricted to ids seen this session, in a stable order."""
        return sorted(pid for pid in self.selected_ids() if pid in self._known)

    @property
    def all_on_page_selected(self) -> bool:
        return bool(self._visible) and all(self._selected.get(pid, False) for pid in self._visible)

    @property
    def count(self) -> int:
        return len(self.selected_ids())

    def clear(self) -> None:
        self._selected.clear()

    def as_dict(self) -> dict[str, bool]:
        return dict(self._selected)
