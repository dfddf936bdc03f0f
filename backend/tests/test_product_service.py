"""
Product lifecycle tests: append to the open reception, remove LIFO.
"""

import pytest

from pvz.extensions import db
from pvz.models import Product
from pvz.services import product_service, reception_service
from pvz.services.product_service import InvalidProductTypeError, NoProductsError
from pvz.services.reception_service import NoOpenReceptionError


TYPES = ["электроника", "одежда", "обувь"]


@pytest.fixture
def open_reception(pickup_point):
    return reception_service.open_reception(pickup_point.id)


class TestAddProduct:

    def test_add(self, pickup_point, open_reception):
        product = product_service.add_product(pickup_point.id, "электроника")

        assert product.id
        assert product.type == "электроника"
        assert product.reception_id == open_reception.id
        assert product.date_time is not None
        assert product.seq is not None

    def test_listed_newest_first(self, pickup_point, open_reception):
        added = [product_service.add_product(pickup_point.id, t) for t in TYPES * 2]

        listed = product_service.list_products(open_reception.id)

        assert [p.id for p in listed] == [p.id for p in reversed(added)]
        seqs = [p.seq for p in listed]
        assert seqs == sorted(seqs, reverse=True)
        assert len(set(seqs)) == 6

    @pytest.mark.parametrize("product_type", ["мебель", "", None, 1])
    def test_invalid_type(self, pickup_point, open_reception, product_type):
        with pytest.raises(InvalidProductTypeError):
            product_service.add_product(pickup_point.id, product_type)

        assert db.session.query(Product).count() == 0

    def test_invalid_type_checked_before_reception(self, pickup_point):
        with pytest.raises(InvalidProductTypeError):
            product_service.add_product(pickup_point.id, "мебель")

    def test_no_open_reception(self, pickup_point):
        with pytest.raises(NoOpenReceptionError):
            product_service.add_product(pickup_point.id, "обувь")

    def test_add_after_close(self, pickup_point, open_reception):
        product_service.add_product(pickup_point.id, "обувь")
        reception_service.close_reception(open_reception.id)

        with pytest.raises(NoOpenReceptionError):
            product_service.add_product(pickup_point.id, "обувь")

        assert len(product_service.list_products(open_reception.id)) == 1

    def test_new_reception_starts_empty(self, pickup_point, open_reception):
        product_service.add_product(pickup_point.id, "обувь")
        reception_service.close_reception(open_reception.id)

        second = reception_service.open_reception(pickup_point.id)
        product = product_service.add_product(pickup_point.id, "одежда")

        assert product.reception_id == second.id
        assert [p.id for p in product_service.list_products(second.id)] == [product.id]


class TestRemoveLastProduct:

    def test_lifo_until_empty(self, pickup_point, open_reception):
        added = [product_service.add_product(pickup_point.id, t) for t in TYPES]
        expected_remaining = [p.id for p in reversed(added)]

        for _ in added:
            product_service.remove_last_product(pickup_point.id)
            expected_remaining.pop(0)
            remaining = product_service.list_products(open_reception.id)
            assert [p.id for p in remaining] == expected_remaining

        with pytest.raises(NoProductsError):
            product_service.remove_last_product(pickup_point.id)

    def test_remove_then_add_reuses_tail(self, pickup_point, open_reception):
        product_service.add_product(pickup_point.id, "обувь")
        product_service.add_product(pickup_point.id, "одежда")
        product_service.remove_last_product(pickup_point.id)

        product = product_service.add_product(pickup_point.id, "электроника")

        listed = product_service.list_products(open_reception.id)
        assert [p.id for p in listed][0] == product.id
        assert [p.type for p in listed] == ["электроника", "обувь"]

    def test_no_open_reception(self, pickup_point):
        with pytest.raises(NoOpenReceptionError):
            product_service.remove_last_product(pickup_point.id)

    def test_closed_reception_untouched(self, pickup_point, open_reception):
        product_service.add_product(pickup_point.id, "обувь")
        reception_service.close_reception(open_reception.id)

        with pytest.raises(NoOpenReceptionError):
            product_service.remove_last_product(pickup_point.id)

        assert len(product_service.list_products(open_reception.id)) == 1
