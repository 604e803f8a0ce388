from table_columns.engine.strategy import StrategyKind, apply_strategy, is_terminal, resolve_strategy


def test_reserved_keys_resolve_only_without_scope():
    assert resolve_strategy("index", None) is StrategyKind.INDEX
    assert resolve_strategy("action", None) is StrategyKind.ACTION
    assert resolve_strategy("index", False) is StrategyKind.NULL
    assert resolve_strategy("action", True) is StrategyKind.NULL
    assert resolve_strategy("name", None) is StrategyKind.NULL


def test_only_reserved_strategies_are_terminal():
    assert is_terminal(StrategyKind.INDEX)
    assert is_terminal(StrategyKind.ACTION)
    assert not is_terminal(StrategyKind.NULL)


def test_index_strategy_numbers_rows_from_one():
    descriptor = {"dataIndex": "index", "scope": None}

    apply_strategy(StrategyKind.INDEX, descriptor)

    assert descriptor["customRender"]("ignored", {}, 4) == 5
    assert descriptor["customRender"](None, None, 0) == 1


def test_null_strategy_binds_slot_when_scoped_and_drops_scope():
    scoped = {"dataIndex": "name", "scope": True}
    native = {"dataIndex": "name", "scope": False}

    apply_strategy(StrategyKind.NULL, scoped)
    apply_strategy(StrategyKind.NULL, native)

    assert scoped == {"dataIndex": "name", "scopedSlots": {"customRender": "name"}}
    assert native == {"dataIndex": "name"}
