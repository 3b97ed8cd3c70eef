"""
Tests for QuerySpec validation and Python-side evaluation.
"""
import pytest
from types import SimpleNamespace

from dataaccess.exceptions import InvalidArgumentError
from dataaccess.repository import QuerySpec
from sample_app.models import Employee


def _people(*names):
    return [SimpleNamespace(name=name, age=len(name)) for name in names]


@pytest.mark.parametrize("kwargs", [
    {"page_index": -1, "page_size": 10},
    {"page_size": -1},
    {"page_index": 1},
])
def test_check_rejects_invalid_paging(kwargs):
    with pytest.raises(InvalidArgumentError):
        QuerySpec(**kwargs).check()


def test_check_accepts_defaults_and_zero_page_size():
    assert QuerySpec().check().skip == 0
    assert QuerySpec(page_index=3, page_size=0).check().skip == 0
    assert QuerySpec(page_index=2, page_size=5).check().skip == 10


def test_include_accepts_single_path_and_none():
    assert QuerySpec(include="employees").include == ("employees",)
    assert QuerySpec(include=None).include == ()
    assert QuerySpec(include=["a", "b.c"]).include == ("a", "b.c")


def test_apply_filters_orders_and_pages():
    """Filter, then order, then skip and take."""
    query = QuerySpec(
        where=lambda p: p.name != "Zed",
        order_by="name",
        page_index=1,
        page_size=2,
    )
    result = query.apply(_people("Zed", "Dora", "Al", "Bea", "Cy"))
    assert [p.name for p in result] == ["Cy", "Dora"]
    assert isinstance(result, tuple)


def test_apply_with_mapping_filter_and_then_by_order():
    people = _people("Bo", "Al", "Cyd", "Eve")
    result = QuerySpec(where={"age": 3}, order_by=("age", "name")).apply(people)
    assert [p.name for p in result] == ["Cyd", "Eve"]


def test_apply_with_callable_order_key():
    result = QuerySpec(order_by=lambda p: -p.age).apply(_people("Al", "Cyd", "Dora"))
    assert [p.name for p in result] == ["Dora", "Cyd", "Al"]


def test_mapped_attribute_order_key_uses_attribute_name():
    people = [SimpleNamespace(last_name="Smith"), SimpleNamespace(last_name="Jones")]
    result = QuerySpec(order_by=Employee.last_name).apply(people)
    assert [p.last_name for p in result] == ["Jones", "Smith"]


def test_sql_expression_cannot_be_evaluated_in_memory():
    query = QuerySpec(where=Employee.first_name == "John")
    with pytest.raises(InvalidArgumentError):
        query.matches(SimpleNamespace(first_name="John"))


def test_apply_orders_none_before_values():
    people = [SimpleNamespace(rank=2), SimpleNamespace(rank=None), SimpleNamespace(rank=1)]
    result = QuerySpec(order_by="rank").apply(people)
    assert [p.rank for p in result] == [None, 1, 2]


@pytest.mark.parametrize("kwargs", [
    {"where": Employee.first_name == "John"},
    {"where": {"nope": 1}},
    {"order_by": "nope"},
    {"order_by": ["last_name", Employee.first_name, "nope"]},
    {"page_index": 1},
])
def test_check_in_memory_rejects_before_evaluating(kwargs):
    with pytest.raises(InvalidArgumentError):
        QuerySpec(**kwargs).check_in_memory(Employee)


def test_check_in_memory_accepts_known_attributes_and_callables():
    query = QuerySpec(
        where={"department_id": None},
        order_by=["last_name", Employee.first_name, lambda e: e.full_name],
    )
    assert query.check_in_memory(Employee) is query
    assert QuerySpec(where=lambda e: True).check_in_memory(Employee).where is not None
