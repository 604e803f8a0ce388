import pytest

from table_columns import ColumnDefinition, ColumnError, TableModel


def _model():
    return TableModel(
        "orders",
        [
            ColumnDefinition("#", "index"),
            ColumnDefinition("Customer", "customer", extra={"default": "guest", "ellipses": 8}),
            ColumnDefinition("Amount", "amount", editable=True, extra={"default": 0.0}),
            ColumnDefinition("Actions", "action"),
        ],
    )


def test_columns_build_descriptors_in_order():
    columns = _model().columns()

    assert [c["dataIndex"] for c in columns] == ["index", "customer", "amount", "action"]
    assert columns[0]["customRender"](None, {}, 0) == 1
    assert "scopedSlots" in columns[2]
    assert columns[3]["align"] == "left"


def test_columns_are_fresh_per_call():
    model = _model()

    first = model.columns()
    second = model.columns()

    assert first[1] is not second[1]
    assert model.columns_spec[1].extra == {"default": "guest", "ellipses": 8}


def test_duplicate_columns_raise():
    model = TableModel("dup", [ColumnDefinition("A", "a"), ColumnDefinition("B", "a")])

    with pytest.raises(ColumnError):
        model.columns()


def test_built_columns_fill_blank_cells_with_default():
    customer = _model().columns()[1]
    record = {"customer": ""}

    rendered = customer["customCell"](record, 0)

    assert rendered["attrs"] == {"title": "guest"}
    assert customer["customRender"]("") == "guest"
