from datetime import datetime, timedelta

import pytest

from lunchly.errors import NotFoundError
from lunchly.models import Customer


def _names(customers):
    return [c.full_name for c in customers]


def test_save_assigns_id_and_get_returns_same_fields(make_customer):
    customer = make_customer("Anna", "Zimmer", "555-0101", "Allergic to nuts")
    assert isinstance(customer.id, int)

    loaded = Customer.get(customer.id)
    assert loaded.id == customer.id
    assert loaded.first_name == "Anna"
    assert loaded.last_name == "Zimmer"
    assert loaded.full_name == "Anna Zimmer"
    assert loaded.phone == "555-0101"
    assert loaded.notes == "Allergic to nuts"


def test_save_with_id_updates_instead_of_inserting(make_customer):
    customer = make_customer("Bob", "Adams")
    original_id = customer.id

    customer.phone = "555-0199"
    customer.notes = "Likes the patio"
    customer.save()

    assert customer.id == original_id
    assert len(Customer.search_customers("")) == 1
    loaded = Customer.get(original_id)
    assert loaded.phone == "555-0199"
    assert loaded.notes == "Likes the patio"


def test_full_name_is_fixed_at_construction():
    customer = Customer(first_name="Bob", last_name="Adams")
    customer.first_name = "Robert"
    assert customer.full_name == "Bob Adams"


def test_get_missing_customer_raises_not_found(app):
    with pytest.raises(NotFoundError) as exc:
        Customer.get(4242)
    assert "4242" in exc.value.message
    assert exc.value.status == 404


def test_search_with_empty_query_returns_everyone_sorted(customers):
    expected = ["Bob Adams", "Carla Adams", "Dan Marino", "Anna Zimmer"]
    assert _names(Customer.search_customers("")) == expected
    assert _names(Customer.search_customers(None)) == expected
    assert _names(Customer.search_customers()) == expected


def test_search_is_case_insensitive_substring(customers):
    assert _names(Customer.search_customers("ADAMS")) == ["Bob Adams", "Carla Adams"]
    assert _names(Customer.search_customers("arin")) == ["Dan Marino"]


def test_search_matches_across_first_and_last_name(customers):
    assert _names(Customer.search_customers("a ad")) == ["Carla Adams"]


def test_search_without_match_returns_empty_list(customers):
    assert Customer.search_customers("nobody") == []


def test_top_ten_orders_by_reservation_count(make_customer, make_reservation):
    start = datetime(2024, 4, 5, 18, 0)
    for count in range(12):
        customer = make_customer(f"Guest{count}", "Tester")
        for n in range(count):
            make_reservation(customer, start_at=start + timedelta(days=n))

    top = Customer.get_top_ten_by_most_reservations()

    assert len(top) == 10
    assert [c.num_reservations for c in top] == list(range(11, 1, -1))
    assert top[0].full_name == "Guest11 Tester"
    assert all(c.num_reservations >= 1 for c in top)


def test_top_ten_excludes_customers_without_reservations(customers, make_reservation):
    make_reservation(customers["dan"])
    make_reservation(customers["dan"])
    make_reservation(customers["anna"])

    top = Customer.get_top_ten_by_most_reservations()

    assert _names(top) == ["Dan Marino", "Anna Zimmer"]
    assert [c.num_reservations for c in top] == [2, 1]


def test_top_ten_empty_without_reservations(customers):
    assert Customer.get_top_ten_by_most_reservations() == []


def test_get_reservations_returns_only_this_customers(customers, make_reservation):
    first = make_reservation(customers["anna"], num_guests=2)
    second = make_reservation(customers["anna"], num_guests=4)
    make_reservation(customers["bob"])

    found = customers["anna"].get_reservations()

    assert sorted(r.id for r in found) == sorted([first.id, second.id])
    assert customers["carla"].get_reservations() == []
