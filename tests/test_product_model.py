"""Tests for Product parsing and ProductDraft validation/serialization."""
import pytest

from src.models.product import Product, ProductDraft, ProductStatus, ValidationError


class TestProductFromDict:

    def test_maps_camel_case_fields(self, make_product):
        product = Product.from_dict(make_product(7, barcode="123", imageUrl="http://img"))
        assert product.id == "7"
        assert product.retail_price == 100.0
        assert product.low_stock_threshold == 5
        assert product.barcode == "123"
        assert product.image_url == "http://img"
        assert product.status == ProductStatus.ACTIVE

    def test_tolerates_bad_values(self):
        product = Product.from_dict({"id": 3, "stock": "n/a", "status": "Archived"})
        assert product.id == "3"
        assert product.stock == 0
        assert product.name == ""
        assert product.status == ProductStatus.ACTIVE

    def test_inactive_status(self, make_product):
        product = Product.from_dict(make_product(1, status="Inactive"))
        assert not product.is_active


class TestProductDraft:

    def test_empty_uses_first_known_brand_and_category(self):
        draft = ProductDraft.empty(["Wai Wai", "CG Foods"], ["Snacks"])
        assert draft.brand == "Wai Wai"
        assert draft.category == "Snacks"
        assert draft.status == ProductStatus.ACTIVE

    def test_empty_falls_back_to_defaults(self):
        draft = ProductDraft.empty([], [])
        assert draft.brand == "CG Foods"
        assert draft.category == "Groceries"
        assert draft.threshold_qty == 1
        assert draft.low_stock_threshold == 5

    @pytest.mark.parametrize("name, sku", [("", "SKU"), ("Noodles", "   "), ("  ", "")])
    def test_name_and_sku_required(self, name, sku):
        with pytest.raises(ValidationError, match="Name and SKU are required."):
            ProductDraft(name=name, sku=sku).validate()

    def test_negative_numbers_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative."):
            ProductDraft(name="Rice", sku="R-1", stock=-1).validate()

    def test_payload_trims_and_omits_blank_optionals(self):
        payload = ProductDraft(name="  Rice ", sku=" R-1 ", barcode="  ").to_payload()
        assert payload["name"] == "Rice"
        assert payload["sku"] == "R-1"
        assert "barcode" not in payload
        assert "imageUrl" not in payload
        assert "id" not in payload
        assert payload["status"] == "Active"
        assert payload["lowStockThreshold"] == 5

    def test_from_product_round_trips_editable_fields(self, make_product):
        product = Product.from_dict(make_product(4, stock=9))
        draft = ProductDraft.from_product(product)
        assert draft.name == "Product 4"
        assert draft.stock == 9
        assert draft.updated(stock=1).stock == 1
        assert draft.stock == 9
