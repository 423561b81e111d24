"""Products page state: listing, selection, dialogs, and catalog commands.

Every mutating command follows the same pattern: validate locally, call the
collaborator API, then reload the affected page from the server. Nothing is
patched in place, so what the table shows is always what the API returned.
Failures are caught here and turned into the page's single notification.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from config import DEFAULT_PAGE_SIZE
from src.models.product import Product, ProductDraft, ProductStatus, ValidationError
from src.services.api_client import RequestError
from src.services.product_query import ProductQuery
from src.services.selection import SelectionTracker

logger = logging.getLogger(__name__)


class DialogState(str, Enum):
    IDLE = "idle"
    ADDING = "adding"
    EDITING = "editing"
    VIEWING = "viewing"
    CONFIRMING_DELETE = "confirming_delete"


# Allowed dialog transitions; leaving to IDLE is always allowed.
_TRANSITIONS = {
    DialogState.IDLE: {
        DialogState.ADDING, DialogState.EDITING,
        DialogState.VIEWING, DialogState.CONFIRMING_DELETE,
    },
    DialogState.VIEWING: {DialogState.EDITING},
    DialogState.ADDING: set(),
    DialogState.EDITING: set(),
    DialogState.CONFIRMING_DELETE: set(),
}


class NotificationKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str


class ProductsViewModel:
    """State container for one products page instance."""

    def __init__(
        self,
        client,
        page_size: int = DEFAULT_PAGE_SIZE,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.client = client
        self.query = ProductQuery(client, page_size)
        self.selection = SelectionTracker()
        self.dialog = DialogState.IDLE
        self.draft: ProductDraft | None = None
        self.active_product: Product | None = None
        self.notification: Notification | None = None
        self.saving = False
        self._on_change = on_change

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def products(self) -> list[Product]:
        return self.query.items

    @property
    def active_product_id(self) -> str | None:
        return self.active_product.id if self.active_product else None

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------

    def notify(self, kind: NotificationKind, message: str) -> None:
        self.notification = Notification(NotificationKind(kind), message)
        self._changed()

    def dismiss_notification(self) -> None:
        self.notification = None
        self._changed()

    def _fail(self, exc: Exception, fallback: str) -> None:
        message = getattr(exc, "message", None) or str(exc) or fallback
        logger.warning("%s %s", fallback, message)
        self.notify(NotificationKind.DANGER, message)

    # ------------------------------------------------------------------
    # Dialog workflow
    # ------------------------------------------------------------------

    def _enter(self, target: DialogState) -> None:
        if target not in _TRANSITIONS[self.dialog]:
            raise ValueError(f"Cannot go from {self.dialog.value} to {target.value}")
        self.dialog = target

    def open_add(self) -> None:
        self._enter(DialogState.ADDING)
        self.active_product = None
        self.draft = ProductDraft.empty(self.query.known_brands, self.query.known_categories)
        self._changed()

    def open_edit(self, product: Product) -> None:
        self._enter(DialogState.EDITING)
        self.active_product = product
        self.draft = ProductDraft.from_product(product)
        self._changed()

    def open_view(self, product: Product) -> None:
        self._enter(DialogState.VIEWING)
        self.active_product = product
        self.draft = None
        self._changed()

    def edit_from_view(self) -> None:
        product = self.active_product
        if self.dialog != DialogState.VIEWING or product is None:
            raise ValueError(f"Cannot edit from {self.dialog.value}: no product is being viewed")
        self._enter(DialogState.EDITING)
        self.draft = ProductDraft.from_product(product)
        self._changed()

    def request_delete(self, product: Product) -> None:
        self._enter(DialogState.CONFIRMING_DELETE)
        self.active_product = product
        self.draft = None
        self._changed()

    def close_dialog(self) -> None:
        self.dialog = DialogState.IDLE
        self.draft = None
        self.active_product = None
        self._changed()

    def update_draft(self, **changes) -> None:
        if self.draft is None:
            raise ValueError("No product form is open")
        self.draft = self.draft.updated(**changes)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load brand/category options, then the first page."""
        try:
            await self.query.load_meta()
        except RequestError as exc:
            self._fail(exc, "Failed to load products.")
            return
        await self.reload(page=1)

    async def reload(
        self,
        page: int | None = None,
        page_size: int | None = None,
        clear_selection: bool = False,
    ) -> bool:
        try:
            applied = await self.query.load(page, page_size)
        except RequestError as exc:
            self._fail(exc, "Failed to load products.")
            return False
        if applied:
            if clear_selection:
                self.selection.clear()
            self.selection.show_page(p.id for p in self.query.items)
            self._changed()
        return applied

    async def set_filter(self, **changes) -> bool:
        """Change one or more filter dimensions and reload from page 1."""
        if not self.query.set_filter(**changes):
            return False
        return await self.reload(page=1, clear_selection=True)

    async def clear_filters(self) -> bool:
        if not self.query.clear_filters():
            return False
        return await self.reload(page=1, clear_selection=True)

    async def change_page(self, direction: int) -> bool:
        return await self.reload(page=self.query.adjacent_page(direction))

    async def change_page_size(self, page_size: int) -> bool:
        return await self.reload(page=1, page_size=int(page_size), clear_selection=True)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def save(self) -> bool:
        """Submit the open add/edit form."""
        if self.saving:
            return False
        if self.dialog == DialogState.ADDING:
            return await self.add_product(self.draft)
        if self.dialog == DialogState.EDITING and self.active_product is not None:
            return await self.edit_product(self.active_product.id, self.draft)
        raise ValueError("No product form is open")

    async def add_product(self, draft: ProductDraft) -> bool:
        return await self._save(draft, None)

    async def edit_product(self, product_id: str, draft: ProductDraft) -> bool:
        return await self._save(draft, product_id)

    async def _save(self, draft: ProductDraft, product_id: str | None) -> bool:
        try:
            draft.validate()
        except ValidationError as exc:
            self.notify(NotificationKind.DANGER, str(exc))
            return False

        payload = draft.to_payload()
        self.saving = True
        try:
            if product_id is None:
                await self._call(self.client.create_product, payload)
            else:
                await self._call(self.client.update_product, product_id, payload)
        except RequestError as exc:
            self._fail(exc, "Failed to save product.")
            return False
        finally:
            self.saving = False

        if self.dialog in (DialogState.ADDING, DialogState.EDITING):
            self.close_dialog()
        self.selection.clear()
        self.notify(
            NotificationKind.SUCCESS,
            "Product added." if product_id is None else "Product updated.",
        )
        await self.reload(page=1)
        return True

    async def set_status_one(self, product_id: str, status: ProductStatus) -> bool:
        status = ProductStatus(status)
        try:
            await self._call(self.client.set_product_status, product_id, status.value)
        except RequestError as exc:
            self._fail(exc, "Failed to update product.")
            return False

        if self.dialog == DialogState.CONFIRMING_DELETE:
            self.close_dialog()
        if status == ProductStatus.INACTIVE:
            self.notify(NotificationKind.INFO, "Product set to Inactive.")
        else:
            self.notify(NotificationKind.SUCCESS, "Product set to Active.")
        await self.reload()
        return True

    async def confirm_delete(self) -> bool:
        """Soft-delete the product awaiting confirmation."""
        if self.dialog != DialogState.CONFIRMING_DELETE or self.active_product is None:
            return False
        return await self.set_status_one(self.active_product.id, ProductStatus.INACTIVE)

    async def bulk_set_status(
        self,
        ids,
        status: ProductStatus,
        success_message: str | None = None,
        failure_message: str = "Failed to update selected.",
        success_kind: NotificationKind = NotificationKind.SUCCESS,
    ) -> bool:
        ids = [str(i) for i in ids]
        if not ids:
            return False
        status = ProductStatus(status)
        try:
            await self._call(self.client.bulk_set_status, ids, status.value)
        except RequestError as exc:
            self._fail(exc, failure_message)
            return False

        self.selection.clear()
        self.notify(success_kind, success_message or f"Selected products set to {status.value}.")
        await self.reload()
        return True

    async def activate_selected(self) -> bool:
        return await self.bulk_set_status(
            self.selection.bulk_ids(), ProductStatus.ACTIVE,
            success_message="Selected products activated.",
            failure_message="Failed to activate selected.",
        )

    async def deactivate_selected(self) -> bool:
        return await self.bulk_set_status(
            self.selection.bulk_ids(), ProductStatus.INACTIVE,
            success_message="Selected products deactivated.",
            failure_message="Failed to deactivate selected.",
        )

    async def soft_delete_selected(self) -> bool:
        # Same transition as deactivate; only the wording differs.
        return await self.bulk_set_status(
            self.selection.bulk_ids(), ProductStatus.INACTIVE,
            success_message="Selected products set to Inactive.",
            failure_message="Failed to update selected.",
            success_kind=NotificationKind.INFO,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _call(self, fn, *args):
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, fn, *args)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
