"""Products page -- browse and manage the product catalog."""
import logging

from nicegui import ui

from config import PAGE_SIZE_OPTIONS
from src.models.product import ProductStatus
from src.services.api_client import KhataSathiClient
from src.services.product_query import STATUS_OPTIONS, STOCK_STATUS_OPTIONS
from src.services.products_view_model import DialogState, ProductsViewModel
from src.ui.components.helpers import (
    NOTIFY_TYPES,
    PRODUCT_STATUS_COLORS,
    STOCK_FLAG_COLORS,
    format_money,
    page_header,
    product_thumbnail,
)
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def products_page(search: str | None = None):
    """Render the products page.

    Args:
        search: Optional search term to pre-fill the search input (from URL query param).
    """
    content = build_layout()
    _shown = {"notification": None}

    def _on_change():
        try:
            bulk_bar.refresh()
            table_section.refresh()
            dialog_area.refresh()
        except RuntimeError:
            return  # User navigated away
        note = vm.notification
        if note is not None and note is not _shown["notification"]:
            _shown["notification"] = note
            ui.notify(note.message, type=NOTIFY_TYPES[note.kind.value], close_button=True)

    vm = ProductsViewModel(KhataSathiClient(), on_change=_on_change)
    if search:
        vm.query.set_filter(q=search)

    with content:
        page_header(
            "Products",
            subtitle="Manage your catalog, stock levels and pricing.",
            icon="inventory_2",
        )

        # ===================================================================
        # Filters
        # ===================================================================
        @ui.refreshable
        def filters_section():
            criteria = vm.query.criteria
            with ui.card().classes("w-full p-4"):
                with ui.row().classes("w-full items-center gap-3 flex-wrap"):
                    search_input = ui.input(
                        placeholder="Search by name, SKU or barcode...",
                        value=criteria.q,
                    ).props("clearable outlined dense").classes("flex-1 min-w-[240px]")
                    search_input.props('prepend-inner-icon="search"')

                    ui.button("Add Product", icon="add", on_click=vm.open_add).props(
                        "color=primary"
                    )

                with ui.row().classes("w-full items-center gap-3 flex-wrap mt-2"):
                    brand_select = ui.select(
                        vm.query.brands, value=criteria.brand, label="Brand",
                    ).props("outlined dense").classes("w-48")
                    category_select = ui.select(
                        vm.query.categories, value=criteria.category, label="Category",
                    ).props("outlined dense").classes("w-48")
                    stock_select = ui.select(
                        STOCK_STATUS_OPTIONS, value=criteria.stock_status, label="Stock",
                    ).props("outlined dense").classes("w-40")
                    status_select = ui.select(
                        STATUS_OPTIONS, value=criteria.status, label="Status",
                    ).props("outlined dense").classes("w-40")
                    low_only = ui.checkbox("Low stock only", value=criteria.low_only)
                    ui.space()
                    ui.button("Clear", icon="filter_alt_off", on_click=_clear_filters).props(
                        "flat color=secondary"
                    )

            _search_timer = {"ref": None}

            def _debounced_search(_):
                if _search_timer["ref"] is not None:
                    _search_timer["ref"].cancel()

                async def _apply():
                    await vm.set_filter(q=search_input.value or "")

                _search_timer["ref"] = ui.timer(0.3, _apply, once=True)

            search_input.on_value_change(_debounced_search)

            async def _on_filter(field: str, value):
                await vm.set_filter(**{field: value})

            brand_select.on_value_change(lambda e: _on_filter("brand", e.value))
            category_select.on_value_change(lambda e: _on_filter("category", e.value))
            stock_select.on_value_change(lambda e: _on_filter("stock_status", e.value))
            status_select.on_value_change(lambda e: _on_filter("status", e.value))
            low_only.on_value_change(lambda e: _on_filter("low_only", bool(e.value)))

        async def _clear_filters():
            await vm.clear_filters()
            filters_section.refresh()

        filters_section()

        # ===================================================================
        # Bulk action bar
        # ===================================================================
        @ui.refreshable
        def bulk_bar():
            count = vm.selection.count
            if count == 0:
                return
            with ui.row().classes("w-full items-center gap-3 p-2").style(
                "background: #FFF7ED; border-left: 4px solid #EA580C"
            ):
                ui.label(f"{count} selected").classes("text-subtitle2 font-bold")
                ui.space()
                ui.button(
                    "Activate", icon="check_circle", on_click=vm.activate_selected,
                ).props("color=positive size=sm")
                ui.button(
                    "Deactivate", icon="block", on_click=vm.deactivate_selected,
                ).props("color=secondary size=sm outline")
                ui.button(
                    "Delete", icon="delete", on_click=vm.soft_delete_selected,
                ).props("color=negative size=sm outline").tooltip("Sets the selected products to Inactive")

        bulk_bar()

        # ===================================================================
        # Table + pagination
        # ===================================================================
        @ui.refreshable
        def table_section():
            query = vm.query
            with ui.card().classes("w-full p-0"):
                with ui.row().classes("w-full items-center gap-4 px-4 py-2 bg-grey-1"):
                    ui.checkbox(
                        value=vm.selection.all_on_page_selected,
                        on_change=lambda e: _toggle_all(e.value),
                    )
                    ui.label("Product").classes("text-caption font-bold text-grey-7 flex-1")
                    ui.label("Brand / Category").classes("text-caption font-bold text-grey-7 w-40")
                    ui.label("Price").classes("text-caption font-bold text-grey-7 w-32")
                    ui.label("Stock").classes("text-caption font-bold text-grey-7 w-32")
                    ui.label("Status").classes("text-caption font-bold text-grey-7 w-20")
                    ui.label("").classes("w-28")

                if not query.items:
                    with ui.column().classes("items-center w-full gap-2 p-8"):
                        ui.icon("inventory_2", size="xl").classes("text-grey-5")
                        ui.label("No products match your filters.").classes(
                            "text-body2 text-secondary"
                        )
                else:
                    for product in query.items:
                        _render_product_row(product)

            with ui.row().classes("w-full items-center gap-3"):
                if query.total:
                    ui.label(
                        f"Showing {query.range_start + 1}-{query.range_end} of {query.total} products"
                    ).classes("text-body2 text-secondary flex-1")
                else:
                    ui.label("Showing 0 of 0 products").classes("text-body2 text-secondary flex-1")
                ui.select(
                    {n: f"{n} / page" for n in PAGE_SIZE_OPTIONS},
                    value=query.page_size,
                    label="Per page",
                    on_change=lambda e: vm.change_page_size(e.value),
                ).props("outlined dense").classes("w-32")
                prev_btn = ui.button(
                    icon="chevron_left", on_click=lambda: vm.change_page(-1),
                ).props("flat dense round")
                ui.label(f"Page {query.current_page} of {query.total_pages}").classes(
                    "text-body2 font-bold"
                )
                next_btn = ui.button(
                    icon="chevron_right", on_click=lambda: vm.change_page(1),
                ).props("flat dense round")
                prev_btn.set_enabled(query.current_page > 1)
                next_btn.set_enabled(query.current_page < query.total_pages)

        def _toggle_all(checked: bool):
            vm.selection.toggle_all(bool(checked))
            bulk_bar.refresh()
            table_section.refresh()

        def _toggle_one(product_id: str, checked: bool):
            vm.selection.toggle_one(product_id, bool(checked))
            bulk_bar.refresh()

        def _render_product_row(p):
            flag = p.stock_flag.value
            with ui.row().classes("w-full items-center gap-4 px-4 py-2").style(
                "border-top: 1px solid #F1F5F9"
            ):
                ui.checkbox(
                    value=vm.selection.is_selected(p.id),
                    on_change=lambda e, pid=p.id: _toggle_one(pid, e.value),
                )
                with ui.row().classes("items-center gap-3 flex-1 cursor-pointer").on(
                    "click", lambda _, prod=p: vm.open_view(prod),
                ):
                    product_thumbnail(p)
                    with ui.column().classes("gap-0"):
                        ui.label(p.name).classes("text-subtitle2 font-bold")
                        ui.label(f"SKU {p.sku}").classes("text-caption text-secondary")
                with ui.column().classes("gap-0 w-40"):
                    ui.label(p.brand).classes("text-body2")
                    ui.label(p.category).classes("text-caption text-secondary")
                with ui.column().classes("gap-0 w-32"):
                    ui.label(format_money(p.retail_price)).classes("text-body2")
                    ui.label(f"WS {format_money(p.wholesale_price)}").classes(
                        "text-caption text-secondary"
                    )
                with ui.column().classes("gap-1 w-32"):
                    ui.label(str(p.stock)).classes("text-body2 font-bold")
                    ui.badge(flag, color=STOCK_FLAG_COLORS.get(flag, "grey-5")).props("outline")
                with ui.element("div").classes("w-20"):
                    ui.badge(
                        p.status.value,
                        color=PRODUCT_STATUS_COLORS.get(p.status.value, "grey-5"),
                    )
                with ui.row().classes("gap-0 w-28 justify-end"):
                    ui.button(
                        icon="visibility", on_click=lambda prod=p: vm.open_view(prod),
                    ).props("flat round dense size=sm color=secondary").tooltip("View")
                    ui.button(
                        icon="edit", on_click=lambda prod=p: vm.open_edit(prod),
                    ).props("flat round dense size=sm color=primary").tooltip("Edit")
                    ui.button(
                        icon="delete", on_click=lambda prod=p: vm.request_delete(prod),
                    ).props("flat round dense size=sm color=negative").tooltip("Delete product")

        table_section()

        # ===================================================================
        # Dialogs (add / edit / view / confirm delete)
        # ===================================================================
        @ui.refreshable
        def dialog_area():
            if vm.dialog in (DialogState.ADDING, DialogState.EDITING):
                _product_form_dialog()
            elif vm.dialog == DialogState.VIEWING:
                _product_view_dialog()
            elif vm.dialog == DialogState.CONFIRMING_DELETE:
                _confirm_delete_dialog()

        def _product_form_dialog():
            draft = vm.draft
            is_edit = vm.dialog == DialogState.EDITING
            brand_options = vm.query.known_brands or [draft.brand]
            category_options = vm.query.known_categories or [draft.category]
            if draft.brand not in brand_options:
                brand_options = brand_options + [draft.brand]
            if draft.category not in category_options:
                category_options = category_options + [draft.category]

            with ui.dialog(value=True).props("persistent"), ui.card().classes("w-full").style(
                "min-width: 560px"
            ):
                ui.label("Edit Product" if is_edit else "Add Product").classes(
                    "text-subtitle1 font-bold"
                )
                with ui.row().classes("w-full gap-3"):
                    ui.input(
                        "Product name", value=draft.name,
                        on_change=lambda e: vm.update_draft(name=e.value or ""),
                    ).props("outlined dense").classes("flex-1")
                    ui.input(
                        "SKU", value=draft.sku,
                        on_change=lambda e: vm.update_draft(sku=e.value or ""),
                    ).props("outlined dense").classes("w-40")
                with ui.row().classes("w-full gap-3"):
                    ui.input(
                        "Barcode (optional)", value=draft.barcode or "",
                        on_change=lambda e: vm.update_draft(barcode=e.value or None),
                    ).props("outlined dense").classes("flex-1")
                    ui.input(
                        "Image URL (optional)", value=draft.image_url or "",
                        on_change=lambda e: vm.update_draft(image_url=e.value or None),
                    ).props("outlined dense").classes("flex-1")
                with ui.row().classes("w-full gap-3"):
                    ui.select(
                        brand_options, value=draft.brand, label="Brand",
                        on_change=lambda e: vm.update_draft(brand=e.value),
                    ).props("outlined dense").classes("flex-1")
                    ui.select(
                        category_options, value=draft.category, label="Category",
                        on_change=lambda e: vm.update_draft(category=e.value),
                    ).props("outlined dense").classes("flex-1")
                with ui.row().classes("w-full gap-3"):
                    ui.number(
                        "Retail price", value=draft.retail_price, min=0, format="%.2f",
                        on_change=lambda e: vm.update_draft(retail_price=float(e.value or 0)),
                    ).props("outlined dense").classes("flex-1")
                    ui.number(
                        "Wholesale price", value=draft.wholesale_price, min=0, format="%.2f",
                        on_change=lambda e: vm.update_draft(wholesale_price=float(e.value or 0)),
                    ).props("outlined dense").classes("flex-1")
                    ui.number(
                        "Wholesale min qty", value=draft.threshold_qty, min=0, precision=0,
                        on_change=lambda e: vm.update_draft(threshold_qty=int(e.value or 0)),
                    ).props("outlined dense").classes("flex-1")
                with ui.row().classes("w-full gap-3"):
                    ui.number(
                        "Stock", value=draft.stock, min=0, precision=0,
                        on_change=lambda e: vm.update_draft(stock=int(e.value or 0)),
                    ).props("outlined dense").classes("flex-1")
                    ui.number(
                        "Low-stock threshold", value=draft.low_stock_threshold, min=0, precision=0,
                        on_change=lambda e: vm.update_draft(low_stock_threshold=int(e.value or 0)),
                    ).props("outlined dense").classes("flex-1")
                    ui.select(
                        [s.value for s in ProductStatus], value=draft.status.value, label="Status",
                        on_change=lambda e: vm.update_draft(status=ProductStatus(e.value)),
                    ).props("outlined dense").classes("flex-1")
                with ui.row().classes("justify-end gap-2 mt-4 w-full"):
                    ui.button("Cancel", on_click=vm.close_dialog).props("flat")
                    ui.button(
                        "Save Changes" if is_edit else "Add Product", icon="save",
                        on_click=vm.save,
                    ).props("color=primary")

        def _product_view_dialog():
            p = vm.active_product
            flag = p.stock_flag.value
            with ui.dialog(value=True).props("persistent"), ui.card().classes("w-96"):
                with ui.row().classes("items-center gap-3"):
                    product_thumbnail(p, size=56)
                    with ui.column().classes("gap-0"):
                        ui.label(p.name).classes("text-subtitle1 font-bold")
                        ui.label(f"SKU {p.sku}").classes("text-caption text-secondary")
                ui.separator()
                for label, value in (
                    ("Barcode", p.barcode or "-"),
                    ("Brand", p.brand),
                    ("Category", p.category),
                    ("Retail price", format_money(p.retail_price)),
                    ("Wholesale price", format_money(p.wholesale_price)),
                    ("Wholesale min qty", str(p.threshold_qty)),
                    ("Stock", f"{p.stock} (low at {p.low_stock_threshold})"),
                ):
                    with ui.row().classes("w-full justify-between"):
                        ui.label(label).classes("text-body2 text-secondary")
                        ui.label(value).classes("text-body2")
                with ui.row().classes("gap-2"):
                    ui.badge(flag, color=STOCK_FLAG_COLORS.get(flag, "grey-5")).props("outline")
                    ui.badge(p.status.value, color=PRODUCT_STATUS_COLORS.get(p.status.value, "grey-5"))
                with ui.row().classes("justify-end gap-2 mt-4 w-full"):
                    ui.button("Close", on_click=vm.close_dialog).props("flat")
                    if not p.is_active:
                        ui.button(
                            "Reactivate", icon="restart_alt",
                            on_click=lambda pid=p.id: _reactivate(pid),
                        ).props("color=positive outline")
                    ui.button("Edit", icon="edit", on_click=vm.edit_from_view).props("color=primary")

        async def _reactivate(product_id: str):
            vm.close_dialog()
            await vm.set_status_one(product_id, ProductStatus.ACTIVE)

        def _confirm_delete_dialog():
            p = vm.active_product
            with ui.dialog(value=True).props("persistent"), ui.card():
                ui.label(f'Delete "{p.name}"?').classes("text-subtitle1 font-bold")
                ui.label(
                    "The product will be set to Inactive. It stays in the catalog "
                    "and can be reactivated later."
                ).classes("text-body2 text-secondary")
                with ui.row().classes("justify-end gap-2 mt-4"):
                    ui.button("Cancel", on_click=vm.close_dialog).props("flat")
                    ui.button("Set Inactive", on_click=vm.confirm_delete).props("color=negative")

        dialog_area()

    async def _initialize():
        await vm.initialize()
        logger.debug("Products page ready: %d of %d rows loaded", len(vm.products), vm.query.total)
        try:
            filters_section.refresh()
        except RuntimeError:
            pass

    ui.timer(0.1, _initialize, once=True)
